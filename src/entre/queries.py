"""Convenience queries built on the scan engine.

Each query builds one matcher, runs a single scan and returns what was
collected, in the order the matches were found.

Example:
    >>> substrings_between("Some <First> and <Second>", "<", ">")
    ['First', 'Second']
    >>> first_substring_between("|a|b|", "|", "|")
    'a'

"""

from __future__ import annotations

from entre.matcher import Matcher
from entre.patterns import IdentifierLike, TerminatorLike
from entre.scanner import scan
from entre.span import Match, Span


class _MatchCollector:
    """Handler that records matches in discovery order."""

    __slots__ = ("matches",)

    def __init__(self) -> None:
        self.matches: list[Match] = []

    def __call__(self, content: str, span: Span) -> None:
        self.matches.append(Match(content, span))


def _collect(
    text: str,
    identifiers: IdentifierLike,
    terminators: TerminatorLike,
    *,
    allow_multiple_matches: bool,
) -> list[Match]:
    collector = _MatchCollector()
    scan(
        text,
        [
            Matcher(
                identifiers,
                terminators,
                collector,
                allow_multiple_matches=allow_multiple_matches,
            )
        ],
    )
    return collector.matches


def matches_between(
    text: str,
    identifiers: IdentifierLike,
    terminators: TerminatorLike,
) -> list[Match]:
    """Return every match between identifiers and terminators, with spans.

    Args:
        text: The text to scan
        identifiers: One identifier or a collection of them
        terminators: One terminator or a collection of them

    Returns:
        Matches in the order their terminators were found

    """
    return _collect(text, identifiers, terminators, allow_multiple_matches=True)


def first_match_between(
    text: str,
    identifiers: IdentifierLike,
    terminators: TerminatorLike,
) -> Match | None:
    """Return the first match with its span, or None.

    The matcher is single-shot: the scan stops at the first terminator,
    even when the content before it is empty.

    """
    matches = _collect(text, identifiers, terminators, allow_multiple_matches=False)
    return matches[0] if matches else None


def substrings_between(
    text: str,
    identifiers: IdentifierLike,
    terminators: TerminatorLike,
) -> list[str]:
    """Return every substring between identifiers and terminators.

    Args:
        text: The text to scan
        identifiers: One identifier or a collection of them
        terminators: One terminator or a collection of them

    Returns:
        Substrings in the order their terminators were found; empty
        substrings are never included

    Example:
        >>> substrings_between("<a> -[b]-", ["<", "-["], [">", "]-"])
        ['a', 'b']

    """
    return [match.content for match in matches_between(text, identifiers, terminators)]


def first_substring_between(
    text: str,
    identifiers: IdentifierLike,
    terminators: TerminatorLike,
) -> str | None:
    """Return the first substring between identifiers and terminators, or None."""
    match = first_match_between(text, identifiers, terminators)
    return match.content if match is not None else None


__all__ = [
    "first_match_between",
    "first_substring_between",
    "matches_between",
    "substrings_between",
]
