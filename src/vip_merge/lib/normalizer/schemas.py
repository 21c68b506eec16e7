"""Declared input schemas and the shared normalized record layout.

Both input files have fixed, ordered headers. Each file kind is described by a
``TableSchema`` that ties the accepted header spellings to a typed record
class whose fields are all text (or missing).
"""

from dataclasses import astuple, dataclass, fields

# Columns of a normalized table, in VIP 3.0 order
NORMALIZED_COLUMNS: list[str] = [
    "address_location_name",
    "address_line",
    "address_line2",
    "address_line3",
    "address_city",
    "address_state",
    "address_zip",
    "precinct_id",
]


@dataclass(frozen=True)
class AddressRecord:
    """One row of the voter address file."""

    street: str | None = None
    apt: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    precinct_id: str | None = None

    @property
    def precinct(self) -> str | None:
        return self.precinct_id


@dataclass(frozen=True)
class PollingRecord:
    """One row of the polling place / precinct file."""

    street: str | None = None
    city: str | None = None
    state_zip: str | None = None
    country: str | None = None
    precinct: str | None = None

    def split_state_zip(self) -> tuple[str, str]:
        """Split the combined ``state_zip`` field at its first space.

        Returns:
            Tuple of (state, zip); either part is empty when absent.
        """
        if not self.state_zip:
            return "", ""
        state, _, zipcode = self.state_zip.partition(" ")
        return state, zipcode.strip()


RawRecord = AddressRecord | PollingRecord


@dataclass(frozen=True)
class NormalizedRecord:
    """Address or polling place in the shared VIP layout."""

    location_name: str = ""
    line1: str = ""
    line2: str = ""
    line3: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    precinct_id: str = ""

    def to_dict(self) -> dict[str, str]:
        """Convert to a dict keyed by the normalized table column names.

        Returns:
            Dictionary of column name to value.
        """
        return dict(zip(NORMALIZED_COLUMNS, astuple(self), strict=True))


@dataclass(frozen=True)
class TableSchema:
    """Declared layout of one input file kind.

    Attributes:
        name: Short name used in messages ("address" or "polling").
        headers: Canonical header sequence, in order.
        header_variants: Every accepted header sequence, canonical first.
        record_type: Typed record class built from each row.
    """

    name: str
    headers: tuple[str, ...]
    header_variants: tuple[tuple[str, ...], ...]
    record_type: type

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in fields(self.record_type)]

    def accepts(self, headers: list[str]) -> bool:
        return tuple(headers) in self.header_variants


ADDRESS_SCHEMA = TableSchema(
    name="address",
    headers=("Street", "Apt", "City", "State", "Zip", "Precinct ID"),
    header_variants=(
        ("Street", "Apt", "City", "State", "Zip", "Precinct ID"),
        ("Street", "Apt", "City", "State", "Zip", "Precinct.ID"),
    ),
    record_type=AddressRecord,
)

POLLING_SCHEMA = TableSchema(
    name="polling",
    headers=("Street", "City", "State/ZIP", "Country", "Precinct"),
    header_variants=(
        ("Street", "City", "State/ZIP", "Country", "Precinct"),
        ("Street", "City", "State.ZIP", "Country", "Precinct"),
    ),
    record_type=PollingRecord,
)
