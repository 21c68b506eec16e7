"""Unit tests for the per-precinct export tables."""

import pandas as pd

from vip_merge.lib.merger import (
    MERGED_COLUMNS,
    POLLING_LOCATION_COLUMNS,
    PRECINCT_COLUMNS,
    PRECINCT_POLLING_COLUMNS,
    build_export_tables,
    build_polling_location_roster,
    build_precinct_polling_links,
    build_precinct_roster,
)


def _merged_row(precinct_id: str, city: str, polling_line: str, polling_city: str) -> dict[str, str]:
    row = dict.fromkeys(MERGED_COLUMNS, "")
    row.update(
        {
            "address_line": "1 MAIN ST",
            "address_city": city,
            "address_state": precinct_id[:2],
            "address_zip": "01101",
            "precinct_id": precinct_id,
            "polling_address_line": polling_line,
            "polling_address_city": polling_city,
            "polling_address_state": precinct_id[:2],
            "polling_address_zip": "01102",
        }
    )
    return row


def _merged() -> pd.DataFrame:
    return pd.DataFrame(
        [
            _merged_row("WA-042", "SEATTLE", "9 HALL ST", "SEATTLE"),
            _merged_row("MA-006", "BOSTON", "1 SCHOOL ST", "BOSTON"),
            _merged_row("MA-006", "CAMBRIDGE", "2 LIBRARY RD", "CAMBRIDGE"),
            _merged_row("MA-001", "SPRINGFIELD", "5 TOWN RD", "SPRINGFIELD"),
            _merged_row("WA-042", "TACOMA", "7 PIER WAY", "TACOMA"),
        ],
        columns=MERGED_COLUMNS,
    )


class TestPrecinctRoster:
    """Tests for build_precinct_roster."""

    def test_one_row_per_precinct_sorted(self) -> None:
        roster = build_precinct_roster(_merged())
        assert list(roster.columns) == PRECINCT_COLUMNS
        assert roster["number"].tolist() == ["001", "006", "042"]
        assert roster["id"].tolist() == [1, 2, 3]

    def test_first_city_is_name(self) -> None:
        roster = build_precinct_roster(_merged())
        assert roster["name"].tolist() == ["SPRINGFIELD", "BOSTON", "SEATTLE"]

    def test_start_and_locality(self) -> None:
        roster = build_precinct_roster(_merged(), start=100, locality_id="L1")
        assert roster["id"].tolist() == [100, 101, 102]
        assert set(roster["locality_id"]) == {"L1"}
        assert set(roster["ward"]) == {""}


class TestPollingLocationRoster:
    """Tests for build_polling_location_roster."""

    def test_first_polling_address_keyed_by_precinct(self) -> None:
        roster = build_polling_location_roster(_merged())
        assert list(roster.columns) == POLLING_LOCATION_COLUMNS
        assert roster["id"].tolist() == ["MA-001", "MA-006", "WA-042"]
        assert roster["address_line1"].tolist() == ["5 TOWN RD", "1 SCHOOL ST", "9 HALL ST"]
        assert roster["address_city"].tolist() == ["SPRINGFIELD", "BOSTON", "SEATTLE"]
        assert roster["address_zip"].tolist() == ["01102"] * 3
        assert set(roster["directions"]) == {""}


class TestPrecinctPollingLinks:
    """Tests for build_precinct_polling_links."""

    def test_links_synthetic_id_to_precinct_key(self) -> None:
        links = build_precinct_polling_links(_merged(), start=5)
        assert list(links.columns) == PRECINCT_POLLING_COLUMNS
        assert links["precinct_id"].tolist() == [5, 6, 7]
        assert links["polling_location_id"].tolist() == ["MA-001", "MA-006", "WA-042"]


class TestBuildExportTables:
    """Tests for build_export_tables."""

    def test_row_counts_match_distinct_precincts(self) -> None:
        merged = _merged()
        tables = build_export_tables(merged)
        distinct = merged["precinct_id"].nunique()
        assert len(tables.precincts) == distinct
        assert len(tables.polling_locations) == distinct
        assert len(tables.precinct_polling_locations) == distinct

    def test_link_ids_match_roster_ids(self) -> None:
        tables = build_export_tables(_merged(), start=10)
        assert tables.precinct_polling_locations["precinct_id"].tolist() == tables.precincts["id"].tolist()
        assert (
            tables.precinct_polling_locations["polling_location_id"].tolist()
            == tables.polling_locations["id"].tolist()
        )

    def test_empty_merged_table(self) -> None:
        tables = build_export_tables(pd.DataFrame(columns=MERGED_COLUMNS))
        assert tables.precincts.empty
        assert tables.polling_locations.empty
        assert tables.precinct_polling_locations.empty
        assert list(tables.precincts.columns) == PRECINCT_COLUMNS

    def test_deterministic(self) -> None:
        first = build_export_tables(_merged())
        second = build_export_tables(_merged())
        pd.testing.assert_frame_equal(first.precincts, second.precincts)
        pd.testing.assert_frame_equal(first.polling_locations, second.polling_locations)
