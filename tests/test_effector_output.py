"""
Tests for the EffectorOutput.
"""

import numpy as np
import pytest

from naobridge import constants
from naobridge.configuration import JointName
from naobridge.effector import EffectorOutput


class TestEffectorOutput:
    def test_empty_message_is_sync_only(self):
        assert EffectorOutput().build_message() == '(syn)'

    def test_joint_commands_in_joint_order(self):
        effector = EffectorOutput()
        effector.set_joint_command(JointName.RIGHT_ARM_YAW, -0.5)
        effector.set_joint_command(JointName.NECK_YAW, 1.25)

        assert effector.build_message() == '(he1 1.25)(rae4 -0.5)(syn)'

    def test_all_joint_commands(self):
        effector = EffectorOutput()
        effector.set_all_joint_commands(np.arange(constants.JOINT_COUNT, dtype=float))
        message = effector.build_message()

        assert message.startswith('(he1 0.0)(he2 1.0)(lae1 2.0)')
        assert message.endswith('(rae4 21.0)(syn)')
        assert message.count('(') == constants.JOINT_COUNT + 1

    def test_wrong_vector_size_rejected(self):
        with pytest.raises(ValueError):
            EffectorOutput().set_all_joint_commands([0.0, 1.0])

    def test_say_message(self):
        effector = EffectorOutput()
        effector.set_say_message('hello')

        assert effector.build_message() == '(say hello)(syn)'

    def test_long_say_message_truncated(self):
        effector = EffectorOutput()
        effector.set_say_message('a' * 30)

        assert effector.build_message() == '(say ' + 'a' * 20 + ')(syn)'

    def test_flush_sends_and_clears(self, transport):
        effector = EffectorOutput(transport)
        effector.set_joint_command(JointName.NECK_PITCH, 0.1)
        effector.set_say_message('hi')

        sent = effector.flush()
        effector.flush()

        assert transport.sent == [sent, '(syn)']
        assert sent == '(he2 0.1)(say hi)(syn)'
