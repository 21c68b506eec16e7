"""Merge CLI command for address and polling place files."""

from pathlib import Path

import typer


def merge(
    address_file: Path = typer.Argument(..., help="Path to voter address CSV file", exists=True, dir_okay=False),  # noqa: B008
    polling_file: Path = typer.Argument(..., help="Path to polling place CSV file", exists=True, dir_okay=False),  # noqa: B008
    output: Path | None = typer.Option(None, "--output", help="Output directory"),  # noqa: B008
) -> None:
    """Normalize both files, join them on precinct id, and write VIP export tables."""
    from vip_merge.lib.normalizer import NormalizationError
    from vip_merge.services.merge_service import run_merge

    try:
        result = run_merge(address_file, polling_file, output_dir=output)
    except NormalizationError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo("No output files were written.", err=True)
        raise typer.Exit(code=1) from e
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo("Merge completed:")
    typer.echo(f"  Address rows:        {result.address_rows}")
    typer.echo(f"  Polling rows:        {result.polling_rows}")
    typer.echo(f"  Repaired addresses:  {len(result.repaired_address_rows)}")
    typer.echo(f"  Repaired polling:    {len(result.repaired_polling_rows)}")
    typer.echo(f"  Merged rows:         {result.merged_rows}")
    typer.echo(f"  Precincts:           {result.precinct_count}")
    if result.empty_city_rows:
        typer.echo(f"  Rows with no city:   {len(result.empty_city_rows)}")
    for export in result.exports:
        typer.echo(f"  {export.table}: {export.output_path} ({export.record_count} rows)")
