from ._motion_state import GaitPhase, MotionState

__all__ = ["MotionState", "GaitPhase"]
