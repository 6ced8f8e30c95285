from enum import Enum
from pathlib import Path
from types import MappingProxyType

from naobridge import constants, labels
from naobridge.logger import Logger
from naobridge.motion.keyframe_file import read_sequence
from naobridge.motion.models import KeyframeSequence

log = Logger().setup_logger('Motion catalogue')


class MotionName(Enum):
    """Named keyframe motions. The value is the file name of the motion without suffix."""

    WALK_FORWARD = 'walk_forward-flemming-nika'
    WALK_FORWARD_BEGIN = 'walk_forward-begin'
    WALK_FORWARD_LEFT = 'walk_forward-left'
    WALK_FORWARD_LEFT_END = 'walk_forward-left-end'
    WALK_FORWARD_RIGHT = 'walk_forward-right'
    WALK_FORWARD_RIGHT_END = 'walk_forward-right-end'
    STOP_WALKING = 'nika_stop_walking'
    FALL_BACK = 'nika_fall_back'
    FALL_FORWARD = 'fall_forward'
    STAND_UP_FROM_BACK = 'stand_up_from_back'
    ROLL_OVER_TO_BACK = 'roll_over_to_back'
    TURN_RIGHT = 'turn-right-nika'
    TURN_LEFT = 'turn-left-nika'
    TURN_RIGHT_SMALL = 'turn-right-small-nika'
    TURN_LEFT_SMALL = 'turn-left-small-nika'
    SIDE_STEP_RIGHT = 'side-step-right-nika'
    SIDE_STEP_LEFT = 'side-step-left-nika'
    SIDE_STEP_RIGHT_KIKA = 'side-step-right-kika'
    SIDE_STEP_LEFT_KIKA = 'side-step-left-kika'
    TURN_HEAD_LEFT = 'turn-head-left'
    TURN_HEAD_RIGHT = 'turn-head-right'
    TURN_HEAD_DOWN = 'turn-head-down'
    WAVE = 'wave_nika'
    KICK_THE_BALL = 'kick_the_ball'
    TEST = 'test'

    @property
    def file_name(self) -> str:
        return self.value + constants.KEYFRAME_FILE_SUFFIX


class MotionCatalogue:
    """
    Immutable mapping from motion name to keyframe sequence.

    All motions are loaded once from the keyframe directory. The TEST motion is the exception: sequence()
    reads it from disk on every call so that its file can be edited while the agent runs.
    """

    def __init__(self, sequences=None, directory: Path | str | None = None):
        self._sequences = MappingProxyType(dict(sequences or {}))
        self._directory = Path(directory) if directory is not None else None

    @classmethod
    def from_directory(cls, directory: Path | str) -> 'MotionCatalogue':
        directory = Path(directory)
        log.info(labels.CATALOGUE_LOADING.format(directory))

        sequences = {}
        for name in MotionName:
            if name is MotionName.TEST:
                continue
            sequences[name] = read_sequence(directory / name.file_name, name=name.value)

        return cls(sequences, directory)

    @property
    def directory(self) -> Path | None:
        return self._directory

    @property
    def sequences(self) -> MappingProxyType:
        return self._sequences

    def __contains__(self, name) -> bool:
        return name in self._sequences

    def __len__(self) -> int:
        return len(self._sequences)

    def sequence(self, name: MotionName) -> KeyframeSequence:
        """
        Return the sequence of a named motion.

        Motions which are not part of the catalogue yield an empty sequence.
        """
        if name is MotionName.TEST and self._directory is not None:
            return read_sequence(self._directory / name.file_name, name=name.value)

        sequence = self._sequences.get(name)
        if sequence is None:
            log.error(labels.CATALOGUE_MISSING_MOTION.format(name.value))
            return KeyframeSequence(name=name.value)

        return sequence
