"""ContextVar-based scan configuration for Entre.

Provides context-local configuration using Python's ContextVars (PEP 567).
Every Scanner reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from entre.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(strict_patterns=True)):
        scan(text, matchers)  # PatternError instead of a warning

"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        strict_patterns: Raise PatternError for matchers that can never match
            usefully, instead of logging a warning
        trace_sessions: Log session lifecycle events at DEBUG level

    """

    strict_patterns: bool = False
    trace_sessions: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ScanConfig":
        """Create ScanConfig from a mapping.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"strict_patterns": True, "other": 1})
            ScanConfig(strict_patterns=True, trace_sessions=False)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(trace_sessions=True)):
        ...     get_scan_config().trace_sessions
        True

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
