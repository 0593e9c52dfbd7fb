from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from .config import get_settings
from .errors import ExportError, SpdxLoadError
from .exporter import export_document
from .hierarchy_view import print_hierarchy
from .models import Document
from .spdx_loader import load_document
from .styles import Style
from .tables import Tier, files_table, meta_table, packages_table, relationships_table

app = typer.Typer(help="Query an SPDX software bill of materials")

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CliState:
    spdx_path: Path
    style: Style
    console: Console

    def load(self) -> Document:
        try:
            return load_document(self.spdx_path)
        except SpdxLoadError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=1) from exc


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


def _tier(ip: bool, ext: bool) -> Tier:
    if ext:
        return Tier.EXT
    if ip:
        return Tier.IP
    return Tier.BASIC


@app.callback()
def main(
    ctx: typer.Context,
    spdx: Annotated[
        Optional[Path],
        typer.Option("--spdx", "-s", help="Path to SPDX JSON document"),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable terminal emphasis"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    colored = settings.color and not no_color
    ctx.obj = CliState(
        spdx_path=spdx or settings.spdx_file,
        style=Style.colored() if colored else Style.plain(),
        console=Console(no_color=not colored, highlight=False, soft_wrap=True),
    )
    LOGGER.debug("using SPDX document %s", ctx.obj.spdx_path)


@app.command()
def meta(ctx: typer.Context) -> None:
    """Show document-level metadata."""
    state = _state(ctx)
    state.console.print(meta_table(state.load(), state.style))


@app.command()
def pkgs(
    ctx: typer.Context,
    number: Annotated[Optional[int], typer.Option("--number", "-n", help="Rows to show")] = None,
    ip: Annotated[bool, typer.Option("--ip", help="Show licensing columns")] = False,
    ext: Annotated[bool, typer.Option("--ext", help="Show all columns")] = False,
) -> None:
    """List packages."""
    state = _state(ctx)
    state.console.print(packages_table(state.load(), number, _tier(ip, ext), state.style))


@app.command()
def files(
    ctx: typer.Context,
    number: Annotated[Optional[int], typer.Option("--number", "-n", help="Rows to show")] = None,
    ip: Annotated[bool, typer.Option("--ip", help="Show licensing columns")] = False,
    ext: Annotated[bool, typer.Option("--ext", help="Show all columns")] = False,
) -> None:
    """List files."""
    state = _state(ctx)
    state.console.print(files_table(state.load(), number, _tier(ip, ext), state.style))


@app.command()
def rels(
    ctx: typer.Context,
    number: Annotated[Optional[int], typer.Option("--number", "-n", help="Rows to show")] = None,
) -> None:
    """List relationships."""
    state = _state(ctx)
    state.console.print(relationships_table(state.load(), number, state.style))


@app.command()
def dig(ctx: typer.Context) -> None:
    """Walk DESCRIBES and DEPENDS_ON relationships and show what each package contains."""
    state = _state(ctx)
    print_hierarchy(state.load(), state.style, state.console.print)


@app.command()
def export(
    ctx: typer.Context,
    fmt: Annotated[str, typer.Option("--format", "-f", help="Export format (csv/html)")] = "csv",
    output: Annotated[Path, typer.Option("--output", "-o", help="Output file name")] = Path("export.csv"),
) -> None:
    """Export package rows as CSV or HTML under the report directory."""
    state = _state(ctx)
    document = state.load()
    try:
        written = export_document(document, fmt, output)
    except (ExportError, OSError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Successfully exported to {fmt.upper()}: {written}")
