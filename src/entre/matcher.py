"""Matcher configuration model.

A Matcher bundles the identifiers that open a session, the terminators that
close it, the multiplicity policy and the handler that receives every match.
Matchers are plain values: the scan engine never mutates them and keeps all
of its working state elsewhere.

Thread Safety:
Matcher is frozen. Whether sharing one across threads is safe depends on
the handler it carries.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from entre.patterns import (
    Identifier,
    IdentifierLike,
    Terminator,
    TerminatorLike,
    as_identifiers,
    as_terminators,
)
from entre.span import Span

SpanHandler = Callable[[str, Span], None]
ContentHandler = Callable[[str], None]
Handler = SpanHandler | ContentHandler


@dataclass(frozen=True, slots=True)
class Matcher:
    """Specification of one independent search run during a scan.

    Attributes:
        identifiers: Patterns that open a session (any one suffices)
        terminators: Patterns that close the open session (any one suffices)
        handler: Called for every match, as handler(content, span) when
            report_span is set and as handler(content) otherwise
        allow_multiple_matches: Keep matching after the first match; when
            False the matcher retires as soon as a terminator is found
        report_span: Pass the enclosing Span to the handler

    Usage:
        >>> found = []
        >>> matcher = Matcher.content(["<", "{"], [">", "}"], found.append)
        >>> matcher.report_span
        False

    """

    identifiers: tuple[Identifier, ...]
    terminators: tuple[Terminator, ...]
    handler: Handler
    allow_multiple_matches: bool = True
    report_span: bool = True

    def __post_init__(self) -> None:
        # Accept strings and iterables; store normalized tuples
        object.__setattr__(self, "identifiers", as_identifiers(self.identifiers))
        object.__setattr__(self, "terminators", as_terminators(self.terminators))
        if not callable(self.handler):
            raise TypeError(f"Matcher handler must be callable, got {self.handler!r}")

    @classmethod
    def pair(
        cls,
        identifier: str | Identifier,
        terminator: str | Terminator,
        handler: Handler,
        *,
        allow_multiple_matches: bool = True,
        report_span: bool = True,
    ) -> Matcher:
        """Build a matcher from a single identifier and terminator."""
        return cls(
            (identifier,),
            (terminator,),
            handler,
            allow_multiple_matches=allow_multiple_matches,
            report_span=report_span,
        )

    @classmethod
    def content(
        cls,
        identifiers: IdentifierLike,
        terminators: TerminatorLike,
        handler: ContentHandler,
        *,
        allow_multiple_matches: bool = True,
    ) -> Matcher:
        """Build a matcher whose handler only receives the matched content.

        Example:
            >>> found = []
            >>> scan("<a> <b>", [Matcher.content("<", ">", found.append)])
            >>> found
            ['a', 'b']

        """
        return cls(
            identifiers,
            terminators,
            handler,
            allow_multiple_matches=allow_multiple_matches,
            report_span=False,
        )

    def pattern_issues(self) -> list[str]:
        """Describe configuration problems that make this matcher useless.

        None of these stop a scan: a matcher without identifiers simply
        never matches. They are reported so that mistakes surface early.

        Returns:
            Human-readable problem descriptions, empty if none.

        """
        issues: list[str] = []
        if not self.identifiers:
            issues.append("no identifiers; the matcher can never open a session")
        if not self.terminators:
            issues.append("no terminators; sessions can never be closed")
        if any(i.is_zero_width and not i.start_anchored for i in self.identifiers):
            issues.append(
                "empty identifier without start anchor never matches; "
                "use Identifier.start() for the start of the text"
            )
        if any(t.is_zero_width and not t.end_anchored for t in self.terminators):
            issues.append(
                "empty terminator without end anchor closes after every character; "
                "use Terminator.end() for the end of the text"
            )
        return issues


__all__ = ["ContentHandler", "Handler", "Matcher", "SpanHandler"]
