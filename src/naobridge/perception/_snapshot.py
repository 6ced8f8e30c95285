"""
Typed values produced by the PerceptionDecoder.

One SensorSnapshot is built per cycle. Every optional field is either present or None, values are never
carried over from a previous cycle except the joint angles, which the server reports completely every cycle.
"""

from dataclasses import dataclass, field

import numpy as np

from naobridge import constants
from naobridge.configuration import BodyPartName, FlagId, GoalPostId, PlayMode


@dataclass(frozen=True)
class Polar:
    """A visual detection relative to the camera. Angles in radians, distance in meters."""

    distance: float
    azimuth: float
    elevation: float


@dataclass(frozen=True)
class ForceResistance:
    """Foot contact reading: point of application and force vector."""

    origin: np.ndarray
    force: np.ndarray


@dataclass(frozen=True)
class LineDetection:
    start: Polar
    end: Polar


@dataclass
class PlayerDetection:
    """
    Another robot seen by the camera.

    Team and id are None when the server did not report them. Body parts are keyed by the name the server
    uses, like "head" or "lfoot". A coordinate sent without a part name is stored under "body".
    """

    team: str | None = None
    id: str | None = None
    body_parts: dict[str, Polar] = field(default_factory=dict)

    def body_part(self, part: BodyPartName) -> Polar | None:
        return self.body_parts.get(part.value)


@dataclass(frozen=True)
class HearMessage:
    """A message shouted by another agent. Direction is in radians."""

    time: float
    direction: float
    text: str


@dataclass(frozen=True)
class GameState:
    play_mode: PlayMode
    game_time: float
    unum: int | None = None
    team: str | None = None


def zero_joint_angles() -> np.ndarray:
    return np.zeros(constants.JOINT_COUNT)


@dataclass
class SensorSnapshot:
    time: float | None = None
    joint_angles: np.ndarray = field(default_factory=zero_joint_angles)
    gyro: np.ndarray | None = None
    acc: np.ndarray | None = None
    foot_left: ForceResistance | None = None
    foot_right: ForceResistance | None = None
    ball: Polar | None = None
    goal_posts: dict[GoalPostId, Polar] = field(default_factory=dict)
    flags: dict[FlagId, Polar] = field(default_factory=dict)
    lines: list[LineDetection] = field(default_factory=list)
    players: list[PlayerDetection] = field(default_factory=list)
    hears: list[HearMessage] = field(default_factory=list)
    game_state: GameState | None = None
    parse_error: str | None = None

    @property
    def is_lying_down(self) -> bool:
        """True when the accelerometer shows the torso is not upright."""
        return self.acc is not None and self.acc[2] < constants.LYING_DOWN_ACC_Z

    @property
    def has_error(self) -> bool:
        return self.parse_error is not None
