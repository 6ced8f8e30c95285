"""
This module defines the Keyframe and KeyframeSequence classes, the building blocks of keyframe motions.
"""

from dataclasses import dataclass, field

import numpy as np

from naobridge import constants


def _as_angles(angles) -> np.ndarray:
    vector = np.zeros(constants.JOINT_COUNT)
    values = np.asarray(angles, dtype=float)[: constants.JOINT_COUNT]
    vector[: len(values)] = values
    vector.setflags(write=False)
    return vector


@dataclass(frozen=True, eq=False)
class Keyframe:
    """A pose of all joints and the time allotted to reach it.

    Attributes:
        duration_ms: Transition time from the previous pose, in milliseconds.
        angles: Target angle of every joint in joint order, in degrees. Missing trailing angles are 0.0.
    """

    duration_ms: int
    angles: np.ndarray = field(default_factory=lambda: np.zeros(constants.JOINT_COUNT))

    def __post_init__(self):
        object.__setattr__(self, 'duration_ms', int(self.duration_ms))
        object.__setattr__(self, 'angles', _as_angles(self.angles))

    @property
    def ticks(self) -> int:
        """Number of simulation cycles covered by the transition."""
        return self.duration_ms // constants.TICK_LENGTH_MS

    def __eq__(self, other):
        if not isinstance(other, Keyframe):
            return NotImplemented
        return self.duration_ms == other.duration_ms and np.array_equal(self.angles, other.angles)

    def __hash__(self):
        return hash((self.duration_ms, self.angles.tobytes()))


class KeyframeSequence:
    """
    An ordered list of keyframes with a cursor.

    next_frame() yields the keyframes in order, then None once after the last one, and starts again from the
    first keyframe on the following call.
    """

    def __init__(self, frames=None, name: str = ''):
        self._frames: tuple[Keyframe, ...] = tuple(frames or ())
        self._cursor = 0
        self.name = name

    @property
    def frames(self) -> tuple[Keyframe, ...]:
        return self._frames

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self):
        return iter(self._frames)

    def next_frame(self) -> Keyframe | None:
        if self._cursor >= len(self._frames):
            self._cursor = 0
            return None

        frame = self._frames[self._cursor]
        self._cursor += 1
        return frame

    def rewind(self) -> None:
        self._cursor = 0

    @property
    def duration_ms(self) -> int:
        return sum(frame.duration_ms for frame in self._frames)

    def __repr__(self):
        return f'KeyframeSequence(name={self.name!r}, frames={len(self._frames)})'
