"""
Entre: single-pass substring scanning for Python

Extracts the text found between identifier and terminator strings.
Any number of matchers share one forward pass over the input, each with its
own patterns and handler. Literal patterns only; zero runtime dependencies.

Quick Start:
    >>> from entre import substrings_between
    >>> substrings_between("Some text <Scanned> here", "<", ">")
    ['Scanned']

    >>> # Several independent matchers, one pass
    >>> from entre import Matcher, scan
    >>> tags, refs = [], []
    >>> scan("<a> [b] <c>", [
    ...     Matcher.pair("<", ">", lambda content, span: tags.append(content)),
    ...     Matcher.pair("[", "]", lambda content, span: refs.append(content)),
    ... ])
    >>> tags, refs
    (['a', 'c'], ['b'])

Anchors:
    >>> from entre import Identifier, Terminator
    >>> substrings_between("<Scanned> text", Identifier.start(), ">")
    ['<Scanned']
    >>> substrings_between("key: value", ": ", Terminator.end())
    ['value']
"""

from entre.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from entre.errors import EntreError, PatternError
from entre.matcher import ContentHandler, Handler, Matcher, SpanHandler
from entre.patterns import Identifier, Terminator, as_identifiers, as_terminators
from entre.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from entre.queries import (
    first_match_between,
    first_substring_between,
    matches_between,
    substrings_between,
)
from entre.scanner import Scanner, scan
from entre.span import Match, Span

__version__ = "0.1.0"

__all__ = [
    # Engine
    "Scanner",
    "scan",
    # Configuration model
    "ContentHandler",
    "Handler",
    "Identifier",
    "Match",
    "Matcher",
    "Span",
    "SpanHandler",
    "Terminator",
    "as_identifiers",
    "as_terminators",
    # Queries
    "first_match_between",
    "first_substring_between",
    "matches_between",
    "substrings_between",
    # Config
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Errors
    "EntreError",
    "PatternError",
    "__version__",
]
