"""Single-pass scan engine.

Finds every substring that starts right after an identifier and ends right
before a terminator, for any number of matchers, in one forward pass over
the text. Each position is visited once; there is no backtracking and no
regex.

Working collections (all keyed by the matcher's registration index):

- sessions: an identifier completed and content is accumulating until one
  of the matcher's terminators shows up
- partials: a proper prefix of one or more identifiers has been seen
- idle: matchers waiting for the first character of an identifier

A matcher that is in none of them has retired (single-shot after its
terminator). Once every matcher has retired the rest of the text is skipped.

Nesting:
While a session is open its matcher is not idle, so a repeated identifier is
plain content: ``<Par<Nested>sed>`` between ``<`` and ``>`` yields
``Par<Nested``.

Overlapping identifiers of one matcher:
All candidates survive until contradicted. When a shorter identifier
completes while a longer one is still possible, a session opens for the
shorter one and the partial keeps tracking the longer one. If the longer
identifier completes its session replaces the shorter one; if it is
contradicted the shorter session carries on.

Thread Safety:
Scanner instances are single-use. Create one per scan.
All state is instance-local; handlers run synchronously on the calling thread.

"""

from __future__ import annotations

from bisect import insort
from collections.abc import Iterable
from dataclasses import dataclass

from entre.config import get_scan_config
from entre.errors import PatternError
from entre.matcher import Matcher
from entre.patterns import Identifier, Terminator
from entre.profiling import get_scan_accumulator
from entre.span import Span
from entre.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class _Session:
    """Open session of one matcher.

    Attributes:
        identifier: The identifier that opened the session.
        start: Offset where the identifier began.
        content_start: Offset of the first content character.

    """

    identifier: Identifier
    start: int
    content_start: int


@dataclass(slots=True)
class _PartialSession:
    """Identifier prefix seen so far for one matcher.

    Attributes:
        start: Offset of the first prefix character.
        candidates: Identifiers still consistent with the prefix,
            all longer than the prefix.

    """

    start: int
    candidates: tuple[Identifier, ...]


class Scanner:
    """Single-pass scanner over one text for a list of matchers.

    Usage:
        >>> found = []
        >>> Scanner("a <b> c", [Matcher.content("<", ">", found.append)]).run()
        >>> found
        ['b']

    Thread Safety:
        Scanner instances are single-use. Create one per scan.
        Do not mutate the matchers while a scan is running.

    """

    __slots__ = (
        "_text",
        "_length",
        "_matchers",
        "_sessions",
        "_partials",
        "_idle",
        "_emitted",
        "_trace",
        "_done",
    )

    def __init__(self, text: str, matchers: Iterable[Matcher]) -> None:
        """Initialize scanner and validate matchers.

        Args:
            text: The text to scan
            matchers: Matchers in registration order; this order decides
                emission order when several matchers terminate at once

        Raises:
            PatternError: If ScanConfig.strict_patterns is set and a matcher
                can never match usefully
        """
        config = get_scan_config()
        self._text = text
        self._length = len(text)
        self._matchers: tuple[Matcher, ...] = tuple(matchers)
        self._sessions: dict[int, _Session] = {}
        self._partials: dict[int, _PartialSession] = {}
        self._idle: list[int] = list(range(len(self._matchers)))
        self._emitted = 0
        self._trace = config.trace_sessions
        self._done = False

        for index, matcher in enumerate(self._matchers):
            for issue in matcher.pattern_issues():
                if config.strict_patterns:
                    raise PatternError(issue, matcher_index=index)
                logger.warning("matcher %d: %s", index, issue)

    @property
    def matches_emitted(self) -> int:
        """Number of handler invocations made so far."""
        return self._emitted

    def run(self) -> None:
        """Scan the text once, invoking handlers as matches are found.

        Raises:
            RuntimeError: If the scanner has already been run
            Exception: Whatever a handler raises; the scan is abandoned
        """
        if self._done:
            raise RuntimeError("Scanner instances are single-use")
        self._done = True

        scanned = 0
        if self._text:
            self._open_zero_width_sessions()
            for index, char in enumerate(self._text):
                if not (self._sessions or self._partials or self._idle):
                    if self._trace:
                        logger.debug("all matchers retired at offset %d", index)
                    break
                self._advance_sessions(index)
                self._advance_partials(index, char)
                self._advance_idle(index, char)
                scanned += 1

        if self._trace and self._sessions:
            logger.debug(
                "discarding %d unterminated session(s) for matcher(s) %s",
                len(self._sessions),
                sorted(self._sessions),
            )

        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(self._length, scanned, self._emitted)

    # =========================================================================
    # Per-position steps
    # =========================================================================

    def _open_zero_width_sessions(self) -> None:
        """Open sessions for Identifier.start() before position 0."""
        for matcher_id in list(self._idle):
            for identifier in self._matchers[matcher_id].identifiers:
                if identifier.start_anchored and identifier.is_zero_width:
                    self._idle.remove(matcher_id)
                    self._open_session(matcher_id, identifier, 0, 0)
                    break

    def _advance_sessions(self, index: int) -> None:
        """Extend open sessions by one character and look for terminators."""
        text = self._text
        end = index + 1
        is_last = end == self._length

        for matcher_id in sorted(self._sessions):
            session = self._sessions[matcher_id]
            for terminator in self._matchers[matcher_id].terminators:
                if terminator.end_anchored and not is_last:
                    continue
                if text.endswith(terminator.text, session.content_start, end):
                    self._close_session(matcher_id, session, terminator, end)
                    break

    def _advance_partials(self, index: int, char: str) -> None:
        """Extend identifier prefixes, promoting completed ones to sessions."""
        for matcher_id in sorted(self._partials):
            partial = self._partials[matcher_id]
            offset = index - partial.start
            consistent = [
                candidate
                for candidate in partial.candidates
                if candidate.text[offset] == char
            ]
            completed = next((c for c in consistent if len(c.text) == offset + 1), None)
            pending = tuple(c for c in consistent if len(c.text) > offset + 1)

            if completed is not None:
                # Replaces a session opened by a shorter identifier, if any
                self._open_session(matcher_id, completed, partial.start, index + 1)

            if pending:
                partial.candidates = pending
                continue

            del self._partials[matcher_id]
            if completed is None and matcher_id not in self._sessions:
                # Retry from this character in the idle step below
                insort(self._idle, matcher_id)

    def _advance_idle(self, index: int, char: str) -> None:
        """Start identifier candidates for idle matchers."""
        still_idle: list[int] = []
        for matcher_id in self._idle:
            candidates = [
                identifier
                for identifier in self._matchers[matcher_id].identifiers
                if identifier.text[:1] == char
                and (index == 0 or not identifier.start_anchored)
            ]
            if not candidates:
                still_idle.append(matcher_id)
                continue

            completed = next((c for c in candidates if len(c.text) == 1), None)
            pending = tuple(c for c in candidates if len(c.text) > 1)
            if completed is not None:
                self._open_session(matcher_id, completed, index, index + 1)
            if pending:
                self._partials[matcher_id] = _PartialSession(index, pending)
        self._idle = still_idle

    # =========================================================================
    # Session lifecycle
    # =========================================================================

    def _open_session(
        self,
        matcher_id: int,
        identifier: Identifier,
        start: int,
        content_start: int,
    ) -> None:
        self._sessions[matcher_id] = _Session(identifier, start, content_start)
        if self._trace:
            logger.debug(
                "matcher %d: session opened by %r at offset %d",
                matcher_id,
                identifier.text,
                start,
            )

    def _close_session(
        self,
        matcher_id: int,
        session: _Session,
        terminator: Terminator,
        end: int,
    ) -> None:
        """Resolve a matcher whose terminator ends at ``end``."""
        matcher = self._matchers[matcher_id]
        del self._sessions[matcher_id]
        self._partials.pop(matcher_id, None)
        if matcher.allow_multiple_matches:
            insort(self._idle, matcher_id)
        elif self._trace:
            logger.debug("matcher %d: retired", matcher_id)

        content_end = end - len(terminator.text)
        if content_end <= session.content_start:
            if self._trace:
                logger.debug("matcher %d: empty match at offset %d suppressed", matcher_id, end)
            return

        span = Span(
            start=session.start,
            end=end,
            content_start=session.content_start,
            content_end=content_end,
        )
        if self._trace:
            logger.debug("matcher %d: match %d-%d", matcher_id, span.start, span.end)
        self._emitted += 1
        content = self._text[session.content_start : content_end]
        if matcher.report_span:
            matcher.handler(content, span)
        else:
            matcher.handler(content)


def scan(text: str, matchers: Iterable[Matcher]) -> None:
    """Scan ``text`` once with every matcher, calling handlers per match.

    Matches are reported in the order their terminators are found; matchers
    terminating at the same position report in registration order.

    Args:
        text: The text to scan
        matchers: Matchers in registration order

    Example:
        >>> tags, words = [], []
        >>> scan("<a> [b]", [
        ...     Matcher.pair("<", ">", lambda c, s: tags.append(c)),
        ...     Matcher.pair("[", "]", lambda c, s: words.append(c)),
        ... ])
        >>> tags, words
        (['a'], ['b'])

    """
    Scanner(text, matchers).run()


__all__ = ["Scanner", "scan"]
