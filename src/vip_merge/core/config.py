"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables (or a ``.env`` file)
following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Export
    export_dir: str = Field(
        default="./exports",
        description="Directory for export output files",
    )
    merged_filename: str = Field(
        default="VIP_Data_Associate_Merged_Address_Polling.csv",
        description="File name of the merged address/polling table",
    )
    precinct_filename: str = Field(
        default="precinct.csv",
        description="File name of the VIP precinct table",
    )
    polling_location_filename: str = Field(
        default="polling_location.csv",
        description="File name of the VIP polling location table",
    )
    precinct_polling_filename: str = Field(
        default="precinct_polling_location.csv",
        description="File name of the VIP precinct to polling location table",
    )

    @field_validator(
        "merged_filename",
        "precinct_filename",
        "polling_location_filename",
        "precinct_polling_filename",
    )
    @classmethod
    def validate_csv_filename(cls, v: str) -> str:
        if not v.lower().endswith(".csv") or "/" in v or "\\" in v:
            msg = f"Invalid export file name {v!r}: must be a bare *.csv file name"
            raise ValueError(msg)
        return v

    # VIP precinct table
    precinct_id_start: int = Field(
        default=1,
        description="First synthetic id assigned to precincts",
        gt=0,
    )
    locality_id: str = Field(
        default="",
        description="Value written to the precinct table's locality_id column",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )
    log_json: bool = Field(
        default=False,
        description="Write stderr log records as JSON lines",
    )

    @property
    def export_filenames(self) -> dict[str, str]:
        """Output file names keyed by export table name."""
        return {
            "merged": self.merged_filename,
            "precinct": self.precinct_filename,
            "polling_location": self.polling_location_filename,
            "precinct_polling_location": self.precinct_polling_filename,
        }


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
