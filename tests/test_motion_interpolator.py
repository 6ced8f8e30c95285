"""
Tests for the keyframe interpolation and the named motion presets.
"""

import math

import numpy as np
import pytest

from naobridge import constants
from naobridge.exceptions import MotionPreconditionError
from naobridge.motion import (
    GaitPhase,
    Keyframe,
    KeyframeSequence,
    MotionCatalogue,
    MotionInterpolator,
    MotionName,
    MotionState,
)

from conftest import make_angles


def run_until_idle(interpolator, limit=1000):
    for _ in range(limit):
        if interpolator.ready():
            return
        interpolator.advance()
    raise AssertionError('motion did not finish')


class TestStateMachine:
    """Idle, loading and executing states."""

    def test_idle_advance_is_noop(self, perception, sink):
        interpolator = MotionInterpolator(perception, sink)

        velocities = interpolator.advance()

        assert interpolator.ready()
        assert velocities.shape == (constants.JOINT_COUNT,)
        assert not np.any(velocities)
        assert sink.commands == []

    def test_select_starts_loading(self, perception, sink, two_keyframe_sequence):
        interpolator = MotionInterpolator(perception, sink)
        interpolator.select(two_keyframe_sequence)

        assert interpolator.state is MotionState.LOADING
        assert not interpolator.ready()

    def test_select_while_busy_fails(self, perception, sink, two_keyframe_sequence):
        interpolator = MotionInterpolator(perception, sink)
        interpolator.select(two_keyframe_sequence)
        interpolator.advance()

        with pytest.raises(MotionPreconditionError):
            interpolator.select(KeyframeSequence([Keyframe(100)]))
        assert interpolator.current_sequence is two_keyframe_sequence

    def test_precondition_error_is_assertion(self):
        assert issubclass(MotionPreconditionError, AssertionError)

    def test_empty_sequence_returns_to_idle(self, perception, sink):
        interpolator = MotionInterpolator(perception, sink)
        interpolator.select(KeyframeSequence())

        interpolator.advance()

        assert interpolator.ready()
        assert sink.commands == []


class TestInterpolation:
    def test_final_tick_is_zero(self, perception, sink):
        """A keyframe of d ticks emits velocity on d - 1 ticks and zero on the last one."""
        keyframe = Keyframe(200, make_angles(j0=10.0, j5=-20.0))
        interpolator = MotionInterpolator(perception, sink)
        interpolator.select(KeyframeSequence([keyframe]))

        outputs = [interpolator.advance() for _ in range(keyframe.ticks)]

        assert all(np.any(velocities) for velocities in outputs[:-1])
        assert not np.any(outputs[-1])
        assert interpolator.state is MotionState.LOADING

        interpolator.advance()
        assert interpolator.ready()

    def test_velocities_reach_target(self, perception, sink):
        """With the sensed angle not moving, the delivered angle sums up to the target."""
        interpolator = MotionInterpolator(perception, sink)
        interpolator.select(KeyframeSequence([Keyframe(200, make_angles(j0=10.0))]))

        run_until_idle(interpolator)

        travelled = sum(velocities[0] for velocities in sink.commands) * constants.TICK_LENGTH_MS / 1000
        assert travelled == pytest.approx(math.radians(10.0))

    def test_sensed_target_gives_zero_velocity(self, perception, sink):
        target = make_angles(j2=45.0, j18=-45.0)
        perception.set_joint_degrees(target)
        interpolator = MotionInterpolator(perception, sink)
        interpolator.select(KeyframeSequence([Keyframe(1000, target)]))

        velocities = interpolator.advance()

        assert not np.any(np.abs(velocities) > 1e-12)

    def test_velocity_formula(self, perception, sink):
        perception.set_joint_degrees(make_angles(j0=30.0))
        interpolator = MotionInterpolator(perception, sink)
        interpolator.select(KeyframeSequence([Keyframe(100, make_angles(j0=70.0))]))

        velocities = interpolator.advance()

        # 40 degrees still needed, spread over the 4 ticks before the final one
        assert velocities[0] == pytest.approx(math.radians(10.0) / constants.TICK_LENGTH_MS * 1000)
        assert interpolator.delivered_angles[0] == pytest.approx(10.0)

    def test_two_keyframe_scenario(self, perception, sink, two_keyframe_sequence):
        """The needed angle of joint 0 never grows and the last tick of the keyframe is zero."""
        interpolator = MotionInterpolator(perception, sink)
        interpolator.select(two_keyframe_sequence)

        first = interpolator.advance()
        assert not np.any(first)

        needed = []
        outputs = []
        for _ in range(1000 // constants.TICK_LENGTH_MS):
            outputs.append(interpolator.advance())
            needed.append(interpolator.needed_angles[0])

        assert all(later <= earlier for earlier, later in zip(needed, needed[1:]))
        assert needed[0] == pytest.approx(90.0)
        assert outputs[-1][0] == 0.0
        assert all(velocities[0] > 0 for velocities in outputs[:-1])

        interpolator.advance()
        assert interpolator.ready()

    def test_accumulator_reset_at_keyframe_start(self, perception, sink):
        """Angles delivered in one keyframe are not counted again in the next one."""
        sequence = KeyframeSequence([Keyframe(100, make_angles(j0=10.0)), Keyframe(100, make_angles(j0=10.0))])
        interpolator = MotionInterpolator(perception, sink)
        interpolator.select(sequence)

        for _ in range(5):
            interpolator.advance()
        assert interpolator.delivered_angles[0] == pytest.approx(10.0)
        assert interpolator.state is MotionState.LOADING

        velocities = interpolator.advance()

        assert interpolator.delivered_angles[0] == pytest.approx(2.5)
        assert velocities[0] > 0

    def test_sequence_restarts_on_next_selection(self, perception, sink, two_keyframe_sequence):
        interpolator = MotionInterpolator(perception, sink)

        for _ in range(2):
            interpolator.select(two_keyframe_sequence)
            interpolator.advance()
            assert interpolator.current_keyframe is two_keyframe_sequence.frames[0]
            run_until_idle(interpolator)


@pytest.fixture
def catalogue(keyframe_directory):
    return MotionCatalogue.from_directory(keyframe_directory)


class TestMotionCatalogue:
    def test_loaded_once_per_name(self, catalogue):
        assert catalogue.sequence(MotionName.WALK_FORWARD_LEFT) is catalogue.sequence(MotionName.WALK_FORWARD_LEFT)
        assert len(catalogue.sequence(MotionName.WALK_FORWARD_BEGIN)) == 1

    def test_missing_file_gives_empty_sequence(self, catalogue):
        assert len(catalogue.sequence(MotionName.WAVE)) == 0

    def test_mapping_is_immutable(self, catalogue):
        with pytest.raises(TypeError):
            catalogue.sequences[MotionName.WAVE] = KeyframeSequence()

    def test_test_motion_reloaded(self, keyframe_directory, catalogue, perception, sink):
        test_file = keyframe_directory / 'test.txt'
        test_file.write_text('40 1.0\n', encoding='utf-8')
        interpolator = MotionInterpolator(perception, sink, catalogue)

        interpolator.select_motion(MotionName.TEST)
        run_until_idle(interpolator)
        test_file.write_text('40 1.0\n60 2.0\n', encoding='utf-8')
        interpolator.select_motion(MotionName.TEST)

        assert len(interpolator.current_sequence) == 2


class TestGait:
    """The walk cycle alternates the legs and the gait phase always matches the selected sequence."""

    def test_walk_cycle(self, catalogue, perception, sink):
        interpolator = MotionInterpolator(perception, sink, catalogue)
        steps = []

        for _ in range(3):
            interpolator.walk_forward()
            steps.append((interpolator.current_sequence.name, interpolator.gait_phase))
            run_until_idle(interpolator)

        assert steps == [
            ('walk_forward-begin', GaitPhase.LEFT_LEG_FORWARD),
            ('walk_forward-left', GaitPhase.RIGHT_LEG_FORWARD),
            ('walk_forward-right', GaitPhase.LEFT_LEG_FORWARD),
        ]
        assert interpolator.is_walking()

        interpolator.stop_walking()
        assert interpolator.current_sequence.name == 'walk_forward-left-end'
        assert interpolator.gait_phase is GaitPhase.STANDING

    def test_stop_from_right_leg(self, catalogue, perception, sink):
        interpolator = MotionInterpolator(perception, sink, catalogue)
        for _ in range(2):
            interpolator.walk_forward()
            run_until_idle(interpolator)

        interpolator.stop_walking()

        assert interpolator.current_sequence.name == 'walk_forward-right-end'

    def test_stop_while_standing_fails(self, catalogue, perception, sink):
        interpolator = MotionInterpolator(perception, sink, catalogue)

        with pytest.raises(MotionPreconditionError):
            interpolator.stop_walking()
        assert interpolator.ready()

    def test_phase_unchanged_when_busy(self, catalogue, perception, sink):
        interpolator = MotionInterpolator(perception, sink, catalogue)
        interpolator.walk_forward()

        with pytest.raises(MotionPreconditionError):
            interpolator.walk_forward()
        assert interpolator.gait_phase is GaitPhase.LEFT_LEG_FORWARD
        assert interpolator.current_sequence.name == 'walk_forward-begin'

    def test_lying_down_blocks_walking(self, catalogue, perception, sink):
        perception.snapshot.acc = np.array([0.0, 2.0, 1.0])
        interpolator = MotionInterpolator(perception, sink, catalogue)

        assert interpolator.gait_phase is GaitPhase.LYING_DOWN
        with pytest.raises(MotionPreconditionError):
            interpolator.walk_forward()

    def test_stand_up_from_back(self, catalogue, perception, sink):
        perception.snapshot.acc = np.array([0.0, 2.0, 1.0])
        interpolator = MotionInterpolator(perception, sink, catalogue)

        interpolator.stand_up()
        assert interpolator.current_sequence.name == 'stand_up_from_back'

        perception.snapshot.acc = np.array([0.0, 0.0, 9.81])
        assert interpolator.gait_phase is GaitPhase.STANDING

    def test_roll_over_when_lying_on_front(self, catalogue, perception, sink):
        perception.snapshot.acc = np.array([0.0, -2.0, 1.0])
        interpolator = MotionInterpolator(perception, sink, catalogue)

        interpolator.stand_up()

        assert interpolator.current_sequence.name == 'roll_over_to_back'
        assert interpolator.gait_phase is GaitPhase.LYING_DOWN
