#!/usr/bin/env python3
"""
PDF Export and Page Planning CLI

Plans content-aware page breaks and exports paginated A4 PDFs from a
pre-rendered bitmap of the resume's export HTML.

Rasterizing HTML is done outside FOLIO: render the export HTML
(`render_resume.py html --export`), capture the ".resume-paper" element as a
PNG, and record every ".resume-section" / ".entry" box in a JSON manifest:

    {"cssHeight": 1754.0, "blocks": [{"top": 0, "height": 120.5}, ...]}

Commands:
    plan   - Print page segments for given heights and safe cuts
    export - Export a PDF from a config, a bitmap and its block manifest

Examples:\n

    export_pdf.py plan 1500 800 --cut 400 --cut 820     # Planner dry run

    export_pdf.py export -c me.yml --image me.png --blocks me.json
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.intake import ConfigLoadError, load_config, normalize_config
from folio.contexts.rendering import (
    ExportError,
    PaginationSettings,
    PrerenderedRasterizer,
    export_resume_pdf,
    plan_page_segments,
)
from folio.contexts.rendering.logger import setup_rendering_logger
from folio.utils.logger import session_log_dir
from folio.utils.pdf_processing import page_count

load_dotenv()
RESULTS_PATH = Path(os.getenv("FOLIO_RESULTS_PATH", "outs/results"))


def display_path(path: Path) -> str:
    """Return path relative to the working directory for cleaner display."""
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Plan content-aware page breaks and export paginated resume PDFs",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("plan")
def plan_command(
    total_height: Annotated[int, typer.Argument(help="Bitmap height in pixels")],
    page_height: Annotated[int, typer.Argument(help="Printable page height in pixels", min=1)],
    cuts: Annotated[
        Optional[List[int]],
        typer.Option("--cut", help="Safe cut offset (repeatable)"),
    ] = None,
    min_segment_ratio: Annotated[
        Optional[float],
        typer.Option("--min-ratio", help="Smallest page fraction that may end on a safe cut"),
    ] = None,
    min_slack_px: Annotated[
        Optional[int],
        typer.Option("--min-slack", help="Cuts within this many pixels of the page start are ignored"),
    ] = None,
):
    """
    Print the page segments the planner produces.

    0 and TOTAL_HEIGHT are always safe cuts.

    Examples:\n

        $ export_pdf.py plan 1500 800 --cut 400 --cut 820

        $ export_pdf.py plan 3000 1000 --cut 900 --min-ratio 0.9
    """
    try:
        defaults = PaginationSettings.from_env()
        settings = PaginationSettings(
            min_segment_ratio=(
                defaults.min_segment_ratio if min_segment_ratio is None else min_segment_ratio
            ),
            min_slack_px=defaults.min_slack_px if min_slack_px is None else min_slack_px,
        )
    except ValueError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    safe_cuts = {0, total_height, *(cuts or [])}
    segments = plan_page_segments(total_height, page_height, safe_cuts, settings)

    typer.secho(f"\n{len(segments)} page(s)", fg=typer.colors.BLUE, bold=True)
    for index, (start, end) in enumerate(segments, 1):
        typer.echo(f"  Page {index}: [{start}, {end})  {end - start}px")
    typer.echo("")


@app.command("export")
def export_command(
    image: Annotated[
        Path,
        typer.Option("--image", "-i", help="PNG bitmap of the export HTML", exists=True),
    ],
    blocks: Annotated[
        Path,
        typer.Option("--blocks", "-b", help="JSON manifest of content block boxes", exists=True),
    ],
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Config file (default: embedded resume)"),
    ] = None,
    output_dir: Annotated[
        Optional[Path],
        typer.Option("--output-dir", "-o", help="Directory for the PDF (default: FOLIO_RESULTS_PATH)"),
    ] = None,
):
    """
    Export a paginated A4 PDF.

    The output file name comes from the config's site.pdfFileName.

    Examples:\n

        $ export_pdf.py export -c me.yml --image me.png --blocks me.json

        $ export_pdf.py export -i me.png -b me.json -o outs/pdf
    """
    log_file = setup_rendering_logger(session_log_dir("export"))

    typer.secho("\nExporting PDF", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Bitmap: {display_path(image)}")
    typer.echo("")

    try:
        document = normalize_config(load_config(config))
        result = export_resume_pdf(
            document,
            PrerenderedRasterizer(image, blocks),
            output_dir or RESULTS_PATH,
        )
    except (ConfigLoadError, ExportError) as e:
        typer.secho(f"✗ Export failed: {e}\n", fg=typer.colors.RED, bold=True, err=True)
        typer.echo(f"  Log: {display_path(log_file)}")
        raise typer.Exit(code=1)

    typer.secho("✓ Export succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Pages: {page_count(result.pdf_path)}")
    typer.echo(f"  PDF: {display_path(result.pdf_path)}")
    typer.echo(f"  Log: {display_path(log_file)}")
    typer.echo("")


if __name__ == "__main__":
    app()
