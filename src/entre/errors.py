"""Exception classes for Entre.

Scanning itself never fails: a missing, empty or unterminated match is simply
not reported. Exceptions are reserved for matcher configurations that are
rejected up front.
"""

from __future__ import annotations


class EntreError(Exception):
    """Base exception for all Entre errors.
    
    Subclass this for specific error categories.
    """

    pass


class PatternError(EntreError):
    """Matcher configuration that can never produce a useful match.
    
    Raised only when ScanConfig.strict_patterns is enabled; otherwise the
    same problems are logged as warnings and scanning proceeds.
    """

    def __init__(self, message: str, matcher_index: int | None = None) -> None:
        """Initialize pattern error with optional matcher position.
        
        Args:
            message: Description of the problem
            matcher_index: Registration index of the offending matcher
        """
        self.message = message
        self.matcher_index = matcher_index

        location = f"matcher {matcher_index}: " if matcher_index is not None else ""
        super().__init__(f"{location}{message}")
