"""Shared test fixtures for raw input tables, CSV files, and settings."""

from pathlib import Path

import pandas as pd
import pytest

from vip_merge.core.config import Settings

ADDRESS_HEADERS = ["Street", "Apt", "City", "State", "Zip", "Precinct ID"]
POLLING_HEADERS = ["Street", "City", "State/ZIP", "Country", "Precinct"]

ADDRESS_CSV = (
    "Street,Apt,City,State,Zip,Precinct ID\n"
    "123 Main St,,Springfield,MA,01101,MA-1\n"
    "45 Oak Avenue,Apt 2,Boston,MA,02108,MA-6\n"
    "974 Great Plain Avenue Needham,MA,02492,MA-6,,\n"
    "9 Elm Road,,Worcester,MA,01601,MA-42\n"
)

POLLING_CSV = (
    "Street,City,State/ZIP,Country,Precinct\n"
    "1 School Street,Springfield,MA 01101,USA,MAS-001\n"
    "974 Great Plain Avenue,Needham MA 02492,USA,MAS-006,\n"
    "200 Center Road,Lowell,MA 01852,USA,MAS-7\n"
)


@pytest.fixture
def settings() -> Settings:
    """Test application settings, isolated from any local .env file."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def address_frame() -> pd.DataFrame:
    """Raw address table; row 2 has its columns shifted left."""
    return pd.DataFrame(
        [
            ["123 Main St", None, "Springfield", "MA", "01101", "MA-1"],
            ["45 Oak Avenue", "Apt 2", "Boston", "MA", "02108", "MA-6"],
            ["974 Great Plain Avenue Needham", "MA", "02492", "MA-6", None, None],
            ["9 Elm Road", None, "Worcester", "MA", "01601", "MA-42"],
        ],
        columns=ADDRESS_HEADERS,
    )


@pytest.fixture
def polling_frame() -> pd.DataFrame:
    """Raw polling place table; row 1 has its columns shifted left."""
    return pd.DataFrame(
        [
            ["1 School Street", "Springfield", "MA 01101", "USA", "MAS-001"],
            ["974 Great Plain Avenue", "Needham MA 02492", "USA", "MAS-006", None],
            ["200 Center Road", "Lowell", "MA 01852", "USA", "MAS-7"],
        ],
        columns=POLLING_HEADERS,
    )


@pytest.fixture
def address_csv(tmp_path: Path) -> Path:
    """Address CSV file matching ``address_frame``."""
    path = tmp_path / "addresses.csv"
    path.write_text(ADDRESS_CSV, encoding="utf-8")
    return path


@pytest.fixture
def polling_csv(tmp_path: Path) -> Path:
    """Polling place CSV file matching ``polling_frame``."""
    path = tmp_path / "polling.csv"
    path.write_text(POLLING_CSV, encoding="utf-8")
    return path
