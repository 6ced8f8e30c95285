"""
Errors raised by the naobridge components.

Malformed data inside a single perceptor fragment is recovered locally by the decoder, everything else
is reported to the caller: a desynchronized server connection cannot be repaired in the middle of a run.
"""


class NaoBridgeError(Exception):
    """Base class for all naobridge errors."""


class MalformedInputError(NaoBridgeError):
    """Symbolic text is empty or not embedded in a single pair of parentheses."""


class UnbalancedParenthesesError(MalformedInputError):
    """The nesting level of a symbolic text never returns to zero, or drops below it."""


class PerceptorConversionError(NaoBridgeError):
    """A fragment of a server message could not be converted into a perceptor value."""


class TransportError(NaoBridgeError):
    """The TCP connection to the simulation server failed."""


class KeyframeFormatError(NaoBridgeError, ValueError):
    """A line of a keyframe file could not be converted into a keyframe."""


class MotionPreconditionError(AssertionError):
    """A motion was selected while another one is executing, or from an impossible gait phase."""


__all__ = [
    'NaoBridgeError',
    'MalformedInputError',
    'UnbalancedParenthesesError',
    'PerceptorConversionError',
    'TransportError',
    'KeyframeFormatError',
    'MotionPreconditionError',
]
