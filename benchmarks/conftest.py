"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large templated document (~100KB)."""
    sections = []
    for i in range(400):
        sections.append(
            f"Section {i} greets {{{{name_{i}}}}} and links [[page_{i}]].\n"
            f"<!-- note {i} --> Inline `code_{i}` and a [(marker {i})] here.\n"
            "Some filler text without any delimiters at all, repeated "
            "to make the scanner walk plain content as well.\n"
        )
    return "".join(sections)
