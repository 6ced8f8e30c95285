from enum import Enum


class GoalPostId(Enum):
    """Goal posts reported by the vision perceptor."""

    G1L = 'G1L'
    G1R = 'G1R'
    G2L = 'G2L'
    G2R = 'G2R'


class FlagId(Enum):
    """Corner flags reported by the vision perceptor."""

    F1L = 'F1L'
    F1R = 'F1R'
    F2L = 'F2L'
    F2R = 'F2R'


class BodyPartName(Enum):
    """Body parts of other robots reported by the vision perceptor."""

    HEAD = 'head'
    RIGHT_LOWER_ARM = 'rlowerarm'
    LEFT_LOWER_ARM = 'llowerarm'
    RIGHT_FOOT = 'rfoot'
    LEFT_FOOT = 'lfoot'


class FootId(Enum):
    """Force resistance perceptors in the soles of the feet."""

    LEFT = 'lf'
    RIGHT = 'rf'
