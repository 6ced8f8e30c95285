from enum import Enum


class MotionState(Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    EXECUTING = 'executing'


class GaitPhase(Enum):
    """Posture of the walk cycle, tells which walk sequence may follow."""

    STANDING = 'standing'
    LEFT_LEG_FORWARD = 'left_leg_forward'
    RIGHT_LEG_FORWARD = 'right_leg_forward'
    LYING_DOWN = 'lying_down'
