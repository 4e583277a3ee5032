"""Tests for CLI date filter helper."""

from datetime import date

import click
import pytest

from ermay.cli.date_filters import resolve_cli_date_range
from ermay.utils.date_parser import get_date_range


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_rejects_multiple_periods(capsys):
    period_flags = {"this-month": True, "last-month": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date=None,
            end_date=None,
            period_flags=period_flags,
        )

    assert excinfo.value.exit_code == 1
    err = capsys.readouterr().err
    assert "Only one period option" in err


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    period_flags = {"this-month": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date="2024-01-01",
            end_date=None,
            period_flags=period_flags,
        )

    assert excinfo.value.exit_code == 1
    assert "cannot be combined" in capsys.readouterr().err


def test_resolve_cli_date_range_returns_period_range():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date=None,
        end_date=None,
        period_flags={"this-month": False, "last-year": True},
    )

    assert (start, end) == get_date_range("last-year")


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date="01.02.2024",
        end_date="2024-02-29",
        period_flags={},
    )

    assert start == date(2024, 2, 1)
    assert end == date(2024, 2, 29)


def test_resolve_cli_date_range_open_ended():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date="2024-02-01",
        end_date=None,
        period_flags={},
    )

    assert start == date(2024, 2, 1)
    assert end is None


def test_resolve_cli_date_range_invalid_end_date(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date=None,
            end_date="not-a-date",
            period_flags={},
        )

    assert excinfo.value.exit_code == 1
    assert "Invalid end date" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_reversed_range(capsys):
    with pytest.raises(click.exceptions.Exit):
        resolve_cli_date_range(
            _ctx(),
            start_date="2024-03-01",
            end_date="2024-02-01",
            period_flags={},
        )

    assert "is after end date" in capsys.readouterr().err
