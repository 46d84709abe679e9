"""Tests for the deposit batch script."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import pytest

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from deposit_batch import main, parse_deposit  # noqa: E402


class TestParseDeposit:
    def test_splits_on_first_equals(self):
        assert parse_deposit("12345=100.50") == ("12345", "100.50")

    def test_keeps_empty_check_number_for_validation(self):
        assert parse_deposit("=100") == ("", "100")

    def test_rejects_missing_separator(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_deposit("12345")


class TestMain:
    def test_demo_batch(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "REJECTED fix the amount: bad input: amount cannot be zero" in out
        assert "CLEARED CONF-12345678" in out
        assert "ESCALATED FAKECONF-12345678" in out
        assert "Specialist review queue: 1" in out
        assert "Regulatory review queue: 1" in out

    def test_explicit_deposits(self, capsys):
        assert main(["A1=50", "B2=-3", "--log-level", "WARNING"]) == 0
        out = capsys.readouterr().out
        assert "A1: CLEARED CONF-A1" in out
        assert "B2: REJECTED" in out
