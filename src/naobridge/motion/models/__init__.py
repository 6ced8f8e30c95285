from .keyframe import Keyframe, KeyframeSequence

__all__ = [
    "Keyframe",
    "KeyframeSequence",
]
