"""Benchmark single-pass scanning.

Compares one scan with several matchers against one scan per pattern,
and measures early exit for single-shot queries.

Run with:
    pytest benchmarks/benchmark_scan.py -v --benchmark-only
"""

try:
    import pytest

    from entre import Matcher, first_substring_between, scan, substrings_between

    PAIRS = [("{{", "}}"), ("[[", "]]"), ("<!--", "-->"), ("`", "`"), ("[(", ")]")]

    @pytest.mark.benchmark(group="scan-multi")
    def test_benchmark_single_pass_all_matchers(benchmark, large_document):
        """Benchmark one scan carrying every matcher."""

        def single_pass():
            found = []
            scan(
                large_document,
                [Matcher.pair(i, t, lambda c, s: found.append(c)) for i, t in PAIRS],
            )
            return found

        benchmark(single_pass)

    @pytest.mark.benchmark(group="scan-multi")
    def test_benchmark_one_scan_per_pair(benchmark, large_document):
        """Benchmark one scan per matcher (baseline for ratio)."""

        def per_pair():
            return [substrings_between(large_document, i, t) for i, t in PAIRS]

        benchmark(per_pair)

    @pytest.mark.benchmark(group="scan-first")
    def test_benchmark_first_substring(benchmark, large_document):
        """Benchmark single-shot query that stops after the first match."""
        benchmark(first_substring_between, large_document, "{{", "}}")

except ImportError:
    pass  # pytest not available
