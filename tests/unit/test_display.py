"""Tests for display utilities."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from randseq.display import display_distributions, display_sequence, summarize
from randseq.samplers import SamplerRegistry
from randseq.types import SequenceResult


def make_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


class TestSummarize:
    def test_statistics(self):
        stats = summarize([1.0, 2.0, 3.0, 4.0])
        assert stats["count"] == 4
        assert stats["mean"] == 2.5
        assert stats["min"] == 1.0
        assert stats["max"] == 4.0
        assert stats["std"] == pytest.approx(1.118034, rel=1e-6)

    def test_empty(self):
        assert summarize([]) == {"count": 0}


class TestDisplaySequence:
    def test_truncates_long_sequences(self):
        console, buffer = make_console()
        result = SequenceResult(
            type="general", count=30, distribution="uniform", sequence=[0.5] * 30
        )
        display_sequence(result, console=console, limit=5)
        out = buffer.getvalue()
        assert "Sequence Summary" in out
        assert "uniform" in out
        assert "25 more" in out

    def test_short_sequence_shows_all(self):
        console, buffer = make_console()
        result = SequenceResult(
            type="secure", count=2, distribution="beta", sequence=[0.125, 0.75]
        )
        display_sequence(result, console=console)
        out = buffer.getvalue()
        assert "0.125" in out
        assert "0.75" in out
        assert "more" not in out


class TestDisplayDistributions:
    def test_lists_every_distribution(self):
        console, buffer = make_console()
        display_distributions(SamplerRegistry().describe(), console=console)
        out = buffer.getvalue()
        for name in SamplerRegistry().names():
            assert name in out
        assert "trials (10)" in out
