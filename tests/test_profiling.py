"""Tests for entre.profiling, the scan profiling API."""

from entre import Matcher, scan, substrings_between
from entre.profiling import (
    ScanAccumulator,
    get_scan_accumulator,
    profiled_scan,
)


class TestGetScanAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_scan_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_scan():
            pass
        assert get_scan_accumulator() is None


class TestProfiledScan:
    def test_yields_accumulator(self) -> None:
        with profiled_scan() as acc:
            assert isinstance(acc, ScanAccumulator)
            assert get_scan_accumulator() is acc

    def test_records_scan_call(self) -> None:
        with profiled_scan() as acc:
            substrings_between("<a> <b>", "<", ">")
        assert acc.scan_calls == 1
        assert acc.source_length == 7
        assert acc.positions_scanned == 7
        assert acc.matches_emitted == 2
        assert acc.early_exits == 0

    def test_records_multiple_scans(self) -> None:
        with profiled_scan() as acc:
            substrings_between("<a>", "<", ">")
            substrings_between("", "<", ">")
            substrings_between("[b]", "[", "]")
        assert acc.scan_calls == 3
        assert acc.matches_emitted == 2

    def test_empty_text_is_not_an_early_exit(self) -> None:
        with profiled_scan() as acc:
            substrings_between("", "<", ">")
        assert acc.positions_scanned == 0
        assert acc.early_exits == 0

    def test_early_exit_with_only_single_shot_matchers(self) -> None:
        with profiled_scan() as acc:
            scan(
                "[a] <b> tail",
                [
                    Matcher("[", "]", lambda c, s: None, allow_multiple_matches=False),
                    Matcher("<", ">", lambda c, s: None, allow_multiple_matches=False),
                ],
            )
        assert acc.positions_scanned == 7
        assert acc.early_exits == 1

    def test_total_duration_positive(self) -> None:
        with profiled_scan() as acc:
            substrings_between("<a>", "<", ">")
        assert acc.total_duration_ms > 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = ScanAccumulator().summary()
        assert summary["scan_calls"] == 0
        assert summary["positions_scanned"] == 0
        assert summary["matches_emitted"] == 0

    def test_summary_after_scan(self) -> None:
        with profiled_scan() as acc:
            substrings_between("<a>", "<", ">")
        summary = acc.summary()
        assert summary["scan_calls"] == 1
        assert summary["source_length"] == 3
        assert "total_ms" in summary
