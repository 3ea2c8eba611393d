"""Shared pytest options and fixtures."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest


@dataclass(frozen=True)
class FixtureOptions:
    """Command line switches for fixture-backed tests."""

    update: bool
    compare: bool


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addoption(
        "--update-fixtures",
        action="store_true",
        default=False,
        help="Rewrite expected JSON fixtures from the current encoder output.",
    )
    parser.addoption(
        "--compare-fixtures",
        action="store_true",
        default=False,
        help="Write <fixture>.out.json next to a fixture whose comparison fails.",
    )


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixture_options(request: pytest.FixtureRequest) -> FixtureOptions:
    return FixtureOptions(
        update=request.config.getoption("--update-fixtures"),
        compare=request.config.getoption("--compare-fixtures"),
    )


@pytest.fixture
def eth_definitions_text(fixtures_dir: Path) -> str:
    return (fixtures_dir / "eth_definitions.json").read_text(encoding="utf-8")
