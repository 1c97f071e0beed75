"""
Command-line interface: decode individual tags or check a whole corpus.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import typer

from gntparse.core.errors import TagError
from gntparse.core.formatting import english_name, render_parsing
from gntparse.core.models import CorpusConfig
from gntparse.core.normalizers.morphgnt import parse
from gntparse.processing.batch import CONTRACT_VIOLATION, decode_file

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


@app.command()
def decode(
    tags: List[str] = typer.Argument(..., help="Tags to decode, e.g. 'V- 1AAI-S--'"),
    as_json: bool = typer.Option(False, "--json", help="Print the full record as JSON"),
) -> None:
    """Decode tags given on the command line."""
    failed = 0
    for tag in tags:
        try:
            parsing = parse(tag)
        except TagError as e:
            failed += 1
            typer.echo(f"error: {e.kind}: {e.message}", err=True)
            continue
        except ValueError as e:
            failed += 1
            typer.echo(f"error: {CONTRACT_VIOLATION}: {e}", err=True)
            continue

        if as_json:
            typer.echo(parsing.model_dump_json())
        else:
            typer.echo(f"{tag}\t{render_parsing(parsing)}\t{english_name(parsing)}")

    if failed:
        raise typer.Exit(code=1)


@app.command()
def check(
    input_path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    strict: bool = typer.Option(False, "--strict/--no-strict", help="Stop at the first bad tag"),
    progress: bool = typer.Option(False, "--progress/--no-progress", help="Show a progress bar"),
    encoding: str = typer.Option("utf-8", "--encoding"),
    max_failures: int = typer.Option(20, "--max-failures", min=0, help="Failures to list"),
) -> None:
    """Decode every tag in a corpus file and report the failures."""
    config = CorpusConfig(
        strict=strict,
        show_progress=progress,
        encoding=encoding,
        max_reported_failures=max_failures,
    )
    try:
        report = decode_file(input_path, config)
    except TagError as e:
        typer.echo(f"error: {e.kind}: {e.message}", err=True)
        raise typer.Exit(code=1)
    except UnicodeDecodeError as e:
        typer.echo(f"error: cannot read {input_path} as {encoding}: {e.reason}", err=True)
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"error: {CONTRACT_VIOLATION}: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Tags: {report.total}; Decoded: {report.decoded}; Failed: {report.failed}")
    for failure in report.failures[: config.max_reported_failures]:
        typer.echo(f"  line {failure.line_number}: {failure.tag!r} {failure.kind}: {failure.message}")

    if not report.ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
