import numpy as np
import pytest

from naobridge import constants
from naobridge.motion import Keyframe, KeyframeSequence
from naobridge.perception import SensorSnapshot


class StubPerception:
    """Stands in for the PerceptionDecoder: the test sets the snapshot directly."""

    def __init__(self):
        self.snapshot = SensorSnapshot()

    def set_joint_degrees(self, angles):
        self.snapshot.joint_angles = np.radians(np.asarray(angles, dtype=float))


class RecordingSink:
    """Actuator sink remembering every velocity vector it received."""

    def __init__(self):
        self.commands = []

    def set_all_joint_commands(self, velocities):
        self.commands.append(np.array(velocities, dtype=float))


class RecordingTransport:
    def __init__(self, messages=None):
        self.sent = []
        self._messages = list(messages or [])

    def send_message(self, message):
        self.sent.append(message)

    def receive_frame(self):
        if not self._messages:
            return None
        message = self._messages.pop(0)
        return message if isinstance(message, bytes) else message.encode('utf-8')


def make_angles(**by_index):
    angles = np.zeros(constants.JOINT_COUNT)
    for key, value in by_index.items():
        angles[int(key.lstrip('j'))] = value
    return angles


@pytest.fixture
def perception():
    return StubPerception()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def two_keyframe_sequence():
    return KeyframeSequence(
        [Keyframe(1000, np.zeros(constants.JOINT_COUNT)), Keyframe(1000, make_angles(j0=90.0))],
        name='two keyframes',
    )


@pytest.fixture
def keyframe_directory(tmp_path):
    """A keyframe directory with a short file for every walk sequence and the stand up motions."""
    names = [
        'walk_forward-begin',
        'walk_forward-left',
        'walk_forward-left-end',
        'walk_forward-right',
        'walk_forward-right-end',
        'stand_up_from_back',
        'roll_over_to_back',
    ]
    for index, name in enumerate(names):
        (tmp_path / (name + '.txt')).write_text(f'// {name}\n40 {index + 1}.0\n', encoding='utf-8')
    return tmp_path
