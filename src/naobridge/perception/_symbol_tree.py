"""
Parser for the symbolic expressions exchanged with the simulation server.

A message like ``(GYR (n torso) (rt 0.01 0.07 0.46))`` becomes a tree of SymbolNode objects whose leaves
are plain strings. The text is scanned once, keeping track of the nesting depth.
"""

from dataclasses import dataclass
from typing import Iterator, Union

from naobridge import labels
from naobridge.exceptions import MalformedInputError, UnbalancedParenthesesError

_OPEN = '('
_CLOSE = ')'
_WHITESPACE = ' \t\r\n'


@dataclass(frozen=True)
class SymbolNode:
    """An ordered sequence of children, each either an atom string or a nested node."""

    children: tuple = ()

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator['Symbol']:
        return iter(self.children)

    def __getitem__(self, index):
        return self.children[index]

    @property
    def tag(self) -> str | None:
        """The first child when it is an atom, the identifier of a perceptor fragment."""
        if self.children and isinstance(self.children[0], str):
            return self.children[0]
        return None

    def find(self, tag: str) -> 'SymbolNode | None':
        """Return the first child node whose tag matches, or None."""
        for child in self.children:
            if isinstance(child, SymbolNode) and child.tag == tag:
                return child
        return None

    def __str__(self) -> str:
        return _OPEN + ' '.join(str(child) for child in self.children) + _CLOSE


Symbol = Union[str, SymbolNode]


def _scan(text: str) -> list:
    """
    Scan the text into a list of top level symbols.

    Raises:
        UnbalancedParenthesesError: If a closing parenthesis has no partner, or an opening one is never closed.
    """
    stack: list[list] = [[]]
    atom_start = None

    for position, character in enumerate(text):
        if character == _OPEN or character == _CLOSE or character in _WHITESPACE:
            if atom_start is not None:
                stack[-1].append(text[atom_start:position])
                atom_start = None

            if character == _OPEN:
                stack.append([])
            elif character == _CLOSE:
                if len(stack) == 1:
                    raise UnbalancedParenthesesError(labels.PARSER_UNEXPECTED_CLOSE.format(position))
                children = stack.pop()
                stack[-1].append(SymbolNode(tuple(children)))
        elif atom_start is None:
            atom_start = position

    if atom_start is not None:
        stack[-1].append(text[atom_start:])

    if len(stack) != 1:
        raise UnbalancedParenthesesError(labels.PARSER_UNCLOSED.format(len(stack) - 1))

    return stack[0]


def parse(text: str) -> SymbolNode:
    """
    Parse one symbolic expression and return the content of its outermost parentheses.

    Example: "(a (b c) d)" yields a node with the three children "a", SymbolNode(("b", "c")) and "d".

    Args:
        text (str): Text which must be fully enclosed in exactly one pair of parentheses.

    Returns:
        SymbolNode: The node built from the outer parentheses.

    Raises:
        MalformedInputError: If the text is empty or not enclosed in a single pair of parentheses.
        UnbalancedParenthesesError: If the parentheses do not match.
    """
    if text is None or not text.strip():
        raise MalformedInputError(labels.PARSER_EMPTY_INPUT)

    symbols = _scan(text)

    if len(symbols) != 1 or not isinstance(symbols[0], SymbolNode):
        raise MalformedInputError(labels.PARSER_NOT_ENCLOSED.format(_excerpt(text)))

    return symbols[0]


def parse_message(text: str) -> SymbolNode:
    """
    Parse a complete server message made of concatenated fragments like "(time (now 1.2))(GS (t 0))".

    Args:
        text (str): The message payload.

    Returns:
        SymbolNode: A root node whose children are the fragments of the message.

    Raises:
        MalformedInputError: If the message is empty or contains text outside of parentheses.
        UnbalancedParenthesesError: If the parentheses do not match.
    """
    if text is None or not text.strip():
        raise MalformedInputError(labels.PARSER_EMPTY_INPUT)

    symbols = _scan(text)

    for symbol in symbols:
        if not isinstance(symbol, SymbolNode):
            raise MalformedInputError(labels.PARSER_NOT_ENCLOSED.format(_excerpt(text)))

    return SymbolNode(tuple(symbols))


def _excerpt(text: str, length: int = 40) -> str:
    return text if len(text) <= length else text[:length] + '...'
