"""Unit tests for the merge service pipeline."""

import csv
from pathlib import Path

import pytest

from vip_merge.core.config import Settings
from vip_merge.lib.normalizer import SchemaMismatchError, UnparseableRowError
from vip_merge.services.merge_service import MergeResult, run_merge


def _rows(path: Path) -> list[dict[str, str]]:
    with path.open() as f:
        return list(csv.DictReader(f))


class TestRunMerge:
    """Tests for run_merge."""

    def test_end_to_end(self, address_csv: Path, polling_csv: Path, tmp_path: Path, settings: Settings) -> None:
        out = tmp_path / "out"
        result = run_merge(address_csv, polling_csv, output_dir=out, settings=settings)

        assert isinstance(result, MergeResult)
        assert result.address_rows == 4
        assert result.polling_rows == 3
        assert result.repaired_address_rows == [4]
        assert result.repaired_polling_rows == [3]
        # MA-001: 1 x 1, MA-006: 2 x 1; MA-042 and MA-007 are one-sided
        assert result.merged_rows == 3
        assert result.precinct_count == 2
        assert len(result.exports) == 4

        merged = _rows(out / settings.merged_filename)
        assert [r["precinct_id"] for r in merged] == ["MA-001", "MA-006", "MA-006"]
        assert merged[2]["address_city"] == "NEEDHAM"
        assert merged[2]["polling_address_line"] == "974 GREAT PLAIN AVENUE"

        precincts = _rows(out / "precinct.csv")
        assert [(p["id"], p["name"], p["number"]) for p in precincts] == [
            ("1", "SPRINGFIELD", "001"),
            ("2", "BOSTON", "006"),
        ]

        locations = _rows(out / "polling_location.csv")
        assert [loc["id"] for loc in locations] == ["MA-001", "MA-006"]
        assert locations[1]["address_city"] == "NEEDHAM"
        assert locations[1]["address_zip"] == "02492"

        links = _rows(out / "precinct_polling_location.csv")
        assert links == [
            {"precinct_id": "1", "polling_location_id": "MA-001"},
            {"precinct_id": "2", "polling_location_id": "MA-006"},
        ]

    def test_settings_drive_ids_and_names(self, address_csv: Path, polling_csv: Path, tmp_path: Path) -> None:
        settings = Settings(_env_file=None, precinct_id_start=500, precinct_filename="precincts.csv")  # type: ignore[call-arg]
        run_merge(address_csv, polling_csv, output_dir=tmp_path / "out", settings=settings)
        precincts = _rows(tmp_path / "out" / "precincts.csv")
        assert [p["id"] for p in precincts] == ["500", "501"]

    def test_default_output_dir(self, address_csv: Path, polling_csv: Path, tmp_path: Path) -> None:
        settings = Settings(_env_file=None, export_dir=str(tmp_path / "exports"))  # type: ignore[call-arg]
        result = run_merge(address_csv, polling_csv, settings=settings)
        assert result.exports[0].output_path.parent == tmp_path / "exports"

    def test_schema_mismatch_writes_nothing(self, address_csv: Path, tmp_path: Path, settings: Settings) -> None:
        polling = tmp_path / "bad_polling.csv"
        polling.write_text("Street,City,Zip,Country,Precinct\n1 School Street,Springfield,01101,USA,MAS-001\n")
        out = tmp_path / "out"

        with pytest.raises(SchemaMismatchError):
            run_merge(address_csv, polling, output_dir=out, settings=settings)
        assert not out.exists()

    def test_unrepairable_row_is_named_by_file_line(self, polling_csv: Path, tmp_path: Path, settings: Settings) -> None:
        addresses = tmp_path / "bad_addresses.csv"
        addresses.write_text(
            "Street,Apt,City,State,Zip,Precinct ID\n"
            "123 Main St,,Springfield,MA,01101,MA-1\n"
            "45 Oak Avenue Boston,MA,MA-6,,,\n"
        )
        out = tmp_path / "out"

        with pytest.raises(UnparseableRowError) as exc_info:
            run_merge(addresses, polling_csv, output_dir=out, settings=settings)
        assert exc_info.value.row == 3
        assert not out.exists()
