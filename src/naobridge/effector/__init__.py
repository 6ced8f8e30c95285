from ._effector_output import EffectorOutput

__all__ = ["EffectorOutput"]
