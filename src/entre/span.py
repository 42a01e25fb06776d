"""Offsets of a match within the scanned text.

Thread Safety:
Span and Match are immutable and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open offsets of one match.
    
    The enclosing range covers the identifier, the content and the
    terminator; the content range covers only what lies between them.
    Zero-width anchors contribute nothing to the enclosing range.
    
    Attributes:
        start: Offset where the identifier begins
        end: Offset just past the terminator
        content_start: Offset where the content begins
        content_end: Offset just past the content
    
    Examples:
        >>> text = "a <b> c"
        >>> span = Span(start=2, end=5, content_start=3, content_end=4)
        >>> text[span.as_slice()], text[span.content_slice()]
        ('<b>', 'b')
        
    """

    start: int
    end: int
    content_start: int
    content_end: int

    def as_slice(self) -> slice:
        """Slice selecting identifier, content and terminator."""
        return slice(self.start, self.end)

    def content_slice(self) -> slice:
        """Slice selecting only the content."""
        return slice(self.content_start, self.content_end)

    def __len__(self) -> int:
        return self.end - self.start


class Match(NamedTuple):
    """A matched substring together with where it was found."""

    content: str
    span: Span


__all__ = ["Match", "Span"]
