"""Identifier and Terminator patterns.

An Identifier opens a matching session, a Terminator closes it. Both are
literal strings; neither supports regular expressions. Plain ``str`` values
are accepted anywhere a pattern is expected and mean "match anywhere".

Anchoring:
    Identifier.prefix("<")  # only at position 0
    Identifier.start()      # zero-width, at position 0
    Terminator.suffix(">")  # only ending at the last position
    Terminator.end()        # zero-width, at the end of the text

Thread Safety:
Patterns are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeVar


@dataclass(frozen=True, slots=True)
class Identifier:
    """Literal text that opens a matching session.
    
    Attributes:
        text: The literal text to look for
        start_anchored: Only match when the text begins at position 0
    
    Examples:
        >>> Identifier.prefix("#")
        Identifier(text='#', start_anchored=True)
        >>> Identifier.start().is_zero_width
        True
        
    """

    text: str
    start_anchored: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Identifier text must be str, got {type(self.text).__name__}")

    @classmethod
    def start(cls) -> Identifier:
        """Match the very start of the text, consuming nothing."""
        return cls("", start_anchored=True)

    @classmethod
    def prefix(cls, text: str) -> Identifier:
        """Match text only when it appears at the very start."""
        return cls(text, start_anchored=True)

    @classmethod
    def any_string(cls, text: str) -> Identifier:
        """Match text anywhere. Equivalent to passing the plain string."""
        return cls(text, start_anchored=False)

    @property
    def is_zero_width(self) -> bool:
        return not self.text


@dataclass(frozen=True, slots=True)
class Terminator:
    """Literal text that closes a matching session.
    
    Attributes:
        text: The literal text to look for
        end_anchored: Only match when the text ends at the last position
        
    """

    text: str
    end_anchored: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"Terminator text must be str, got {type(self.text).__name__}")

    @classmethod
    def end(cls) -> Terminator:
        """Match the very end of the text, consuming nothing."""
        return cls("", end_anchored=True)

    @classmethod
    def suffix(cls, text: str) -> Terminator:
        """Match text only when it ends the scanned text."""
        return cls(text, end_anchored=True)

    @classmethod
    def any_string(cls, text: str) -> Terminator:
        """Match text anywhere. Equivalent to passing the plain string."""
        return cls(text, end_anchored=False)

    @property
    def is_zero_width(self) -> bool:
        return not self.text


_PatternT = TypeVar("_PatternT", Identifier, Terminator)

IdentifierLike = str | Identifier | Iterable[str | Identifier]
TerminatorLike = str | Terminator | Iterable[str | Terminator]


def _coerce(value: object, pattern_type: type[_PatternT]) -> tuple[_PatternT, ...]:
    # A str is one pattern, never a collection of one-character patterns.
    if isinstance(value, (str, pattern_type)):
        items: Iterable[object] = (value,)
    elif isinstance(value, Iterable):
        items = value
    else:
        raise TypeError(
            f"Expected str, {pattern_type.__name__} or an iterable of them, "
            f"got {type(value).__name__}"
        )

    patterns: list[_PatternT] = []
    for item in items:
        if isinstance(item, str):
            patterns.append(pattern_type(item))
        elif isinstance(item, pattern_type):
            patterns.append(item)
        else:
            raise TypeError(
                f"Expected str or {pattern_type.__name__}, got {type(item).__name__}"
            )
    # Preserve first-seen order while dropping duplicates
    return tuple(dict.fromkeys(patterns))


def as_identifiers(value: IdentifierLike) -> tuple[Identifier, ...]:
    """Normalize identifiers to an ordered tuple without duplicates.

    Args:
        value: A string, an Identifier, or an iterable of either

    Returns:
        Tuple of Identifier in first-seen order

    Raises:
        TypeError: If any element is neither str nor Identifier

    """
    return _coerce(value, Identifier)


def as_terminators(value: TerminatorLike) -> tuple[Terminator, ...]:
    """Normalize terminators to an ordered tuple without duplicates.

    Args:
        value: A string, a Terminator, or an iterable of either

    Returns:
        Tuple of Terminator in first-seen order

    Raises:
        TypeError: If any element is neither str nor Terminator

    """
    return _coerce(value, Terminator)


__all__ = [
    "Identifier",
    "IdentifierLike",
    "Terminator",
    "TerminatorLike",
    "as_identifiers",
    "as_terminators",
]
