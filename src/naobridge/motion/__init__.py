from .keyframe_file import read_sequence, write_sequence
from .models import Keyframe, KeyframeSequence
from .motion_catalogue import MotionCatalogue, MotionName
from .motion_interpolator import MotionInterpolator
from .state import GaitPhase, MotionState

__all__ = [
    "Keyframe",
    "KeyframeSequence",
    "read_sequence",
    "write_sequence",
    "MotionName",
    "MotionCatalogue",
    "MotionInterpolator",
    "MotionState",
    "GaitPhase",
]
