"""
Keyframe motion playback.

A keyframe motion is a sequence of poses, each with the time allotted to reach it. Once per simulation cycle
advance() turns the current keyframe into angular velocities for all joints and hands them to the actuator sink.
"""

import numpy as np

from naobridge import constants, labels
from naobridge.exceptions import MotionPreconditionError
from naobridge.logger import Logger
from naobridge.motion.models import Keyframe, KeyframeSequence
from naobridge.motion.motion_catalogue import MotionCatalogue, MotionName
from naobridge.motion.state import GaitPhase, MotionState

log = Logger().setup_logger('Motion interpolator')


class MotionInterpolator:
    """
    Plays keyframe sequences on the robot.

    Usage per cycle: check ready(), optionally select a motion, then call advance() exactly once before the
    effector output is flushed. A motion can only be selected while the interpolator is idle, interrupting a
    running motion mid keyframe would make the robot fall.

    The server reports joint angles one cycle late, so the angle still needed for a joint is computed from the
    sensed angle plus what was already delivered within the current keyframe. The last tick of every keyframe
    emits zero velocity.
    """

    def __init__(self, perception, sink, catalogue: MotionCatalogue | None = None):
        """
        Args:
            perception: Object whose snapshot attribute holds the latest SensorSnapshot.
            sink: Actuator sink offering set_all_joint_commands(), usually the EffectorOutput.
            catalogue (MotionCatalogue, optional): Named motions available to select_motion().
        """
        self._perception = perception
        self._sink = sink
        self._catalogue = catalogue if catalogue is not None else MotionCatalogue()

        self._state = MotionState.IDLE
        self._gait_phase = GaitPhase.STANDING
        self._sequence: KeyframeSequence | None = None
        self._keyframe: Keyframe | None = None
        self._ticks_remaining = 0
        self._delivered = np.zeros(constants.JOINT_COUNT)
        self._needed = np.zeros(constants.JOINT_COUNT)

    @property
    def state(self) -> MotionState:
        return self._state

    @property
    def catalogue(self) -> MotionCatalogue:
        return self._catalogue

    @property
    def current_sequence(self) -> KeyframeSequence | None:
        return self._sequence

    @property
    def current_keyframe(self) -> Keyframe | None:
        return self._keyframe

    @property
    def ticks_remaining(self) -> int:
        return self._ticks_remaining

    @property
    def delivered_angles(self) -> np.ndarray:
        """Degrees delivered per joint since the current keyframe started."""
        return self._delivered.copy()

    @property
    def needed_angles(self) -> np.ndarray:
        """Degrees per joint that were still missing to the target at the last executed tick."""
        return self._needed.copy()

    @property
    def gait_phase(self) -> GaitPhase:
        """Current posture of the walk cycle. Switches to LYING_DOWN as soon as the robot is found lying."""
        snapshot = self._perception.snapshot
        if snapshot is not None and snapshot.is_lying_down:
            self._gait_phase = GaitPhase.LYING_DOWN
        return self._gait_phase

    def ready(self) -> bool:
        return self._state == MotionState.IDLE

    def select(self, sequence: KeyframeSequence) -> None:
        """
        Start playing a sequence from its first keyframe with the next advance().

        Raises:
            MotionPreconditionError: If a motion is still running.
        """
        if not self.ready():
            raise MotionPreconditionError(labels.MOTION_SELECT_WHILE_BUSY.format(sequence.name, self._state.value))

        log.info(labels.MOTION_SELECTED.format(sequence.name, len(sequence)))
        sequence.rewind()
        self._sequence = sequence
        self._keyframe = None
        self._state = MotionState.LOADING

    def select_motion(self, name: MotionName) -> None:
        self.select(self._catalogue.sequence(name))

    def walk_forward(self) -> None:
        """
        Make the next step of the walk cycle, starting with the left leg.

        Raises:
            MotionPreconditionError: If a motion is running or the robot is lying down.
        """
        transitions = {
            GaitPhase.STANDING: (MotionName.WALK_FORWARD_BEGIN, GaitPhase.LEFT_LEG_FORWARD),
            GaitPhase.LEFT_LEG_FORWARD: (MotionName.WALK_FORWARD_LEFT, GaitPhase.RIGHT_LEG_FORWARD),
            GaitPhase.RIGHT_LEG_FORWARD: (MotionName.WALK_FORWARD_RIGHT, GaitPhase.LEFT_LEG_FORWARD),
        }
        self._select_gait(transitions, 'walk forward')

    def stop_walking(self) -> None:
        """
        Close the walk cycle with the end step matching the forward leg.

        Raises:
            MotionPreconditionError: If a motion is running or the robot is not walking.
        """
        transitions = {
            GaitPhase.LEFT_LEG_FORWARD: (MotionName.WALK_FORWARD_LEFT_END, GaitPhase.STANDING),
            GaitPhase.RIGHT_LEG_FORWARD: (MotionName.WALK_FORWARD_RIGHT_END, GaitPhase.STANDING),
        }
        self._select_gait(transitions, 'stop walking')

    def is_walking(self) -> bool:
        return self.gait_phase in (GaitPhase.LEFT_LEG_FORWARD, GaitPhase.RIGHT_LEG_FORWARD)

    def stand_up(self) -> None:
        """
        Stand up from the back, or roll over to the back first when lying on the front.

        Raises:
            MotionPreconditionError: If a motion is running.
        """
        snapshot = self._perception.snapshot
        if snapshot is not None and snapshot.acc is not None and snapshot.acc[1] > 0:
            self.stand_up_from_back()
        else:
            self.select_motion(MotionName.ROLL_OVER_TO_BACK)

    def stand_up_from_back(self) -> None:
        self.select_motion(MotionName.STAND_UP_FROM_BACK)
        self._gait_phase = GaitPhase.STANDING

    def _select_gait(self, transitions: dict, action: str) -> None:
        phase = self.gait_phase
        if phase not in transitions:
            raise MotionPreconditionError(labels.MOTION_GAIT_IMPOSSIBLE.format(action, phase.value))

        name, next_phase = transitions[phase]
        # select first, the phase must not change when the selection is refused
        self.select_motion(name)
        self._gait_phase = next_phase

    def advance(self) -> np.ndarray:
        """
        Compute the joint velocities of this cycle and pass them to the sink.

        Safe to call in every cycle: while idle nothing is sent to the sink and a zero vector is returned.

        Returns:
            np.ndarray: Angular velocity per joint in joint order, in radians per second.
        """
        if self._state == MotionState.IDLE:
            return np.zeros(constants.JOINT_COUNT)

        if self._state == MotionState.LOADING:
            self._keyframe = self._sequence.next_frame()

            if self._keyframe is None:
                log.info(labels.MOTION_FINISHED.format(self._sequence.name))
                self._sequence = None
                self._state = MotionState.IDLE
                return np.zeros(constants.JOINT_COUNT)

            self._delivered = np.zeros(constants.JOINT_COUNT)
            self._ticks_remaining = self._keyframe.ticks
            self._state = MotionState.EXECUTING
            log.debug(labels.MOTION_KEYFRAME_STARTED.format(self._keyframe.duration_ms, self._ticks_remaining))

        return self._execute_tick()

    def _execute_tick(self) -> np.ndarray:
        velocities = np.zeros(constants.JOINT_COUNT)

        if self._ticks_remaining > 1:
            sensed = np.degrees(self._perception.snapshot.joint_angles)
            self._needed = self._keyframe.angles - (sensed + self._delivered)
            this_tick = self._needed / (self._ticks_remaining - 1)
            velocities = np.radians(this_tick) / constants.TICK_LENGTH_MS * 1000
            self._delivered += this_tick

        self._state = MotionState.EXECUTING if np.any(velocities != 0) else MotionState.LOADING

        self._sink.set_all_joint_commands(velocities)
        self._ticks_remaining -= 1

        log.debug(labels.MOTION_TICK.format(self._ticks_remaining, self._state.value, float(np.max(np.abs(velocities)))))
        return velocities
