"""Opt-in profiling for scanning.

This module provides accumulated metrics across scan calls:
- Total profiling time
- Characters supplied and characters actually visited
- Matches emitted
- Scans that stopped early because every matcher retired

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from entre import first_substring_between
    from entre.profiling import profiled_scan

    with profiled_scan() as metrics:
        first_substring_between("<a> <b> <c>", "<", ">")

    print(metrics.summary())
    # {"total_ms": 0.1, "scan_calls": 1, "source_length": 11,
    #  "positions_scanned": 3, "matches_emitted": 1, "early_exits": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during scanning.

    Attributes:
        start_time: Profiling start timestamp.
        scan_calls: Number of completed scans recorded.
        source_length: Total length of all scanned texts.
        positions_scanned: Total number of positions the engine visited.
        matches_emitted: Total number of handler invocations.
        early_exits: Scans that skipped the rest of their input.

    """

    start_time: float = field(default_factory=perf_counter)
    scan_calls: int = 0
    source_length: int = 0
    positions_scanned: int = 0
    matches_emitted: int = 0
    early_exits: int = 0

    def record_scan(
        self,
        source_length: int,
        positions_scanned: int,
        matches_emitted: int,
    ) -> None:
        """Record a completed scan.

        Args:
            source_length: Length of the scanned text.
            positions_scanned: Positions visited before the scan finished.
            matches_emitted: Handler invocations made during the scan.

        """
        self.scan_calls += 1
        self.source_length += source_length
        self.positions_scanned += positions_scanned
        self.matches_emitted += matches_emitted
        if positions_scanned < source_length:
            self.early_exits += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scan_calls": self.scan_calls,
            "source_length": self.source_length,
            "positions_scanned": self.positions_scanned,
            "matches_emitted": self.matches_emitted,
            "early_exits": self.early_exits,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated by every scan in the block.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
