#!/usr/bin/env python3
"""
Resume Rendering CLI

Loads a resume configuration (modern or legacy schema), normalizes it, and
writes the canonical document, markdown, or HTML.

Commands:
    normalize - Print the canonical document as modern-schema YAML
    markdown  - Export markdown (contacts unmasked)
    html      - Render the HTML page

Examples:\n

    render_resume.py normalize                          # Embedded default resume

    render_resume.py normalize -c configs/legacy.yml    # Specific config

    render_resume.py markdown -c me.yml -o outs/me.md   # Markdown to file

    render_resume.py html -c me.yml -o outs/me.html     # HTML to file
"""

from pathlib import Path
from typing import Optional

import typer
import yaml
from typing_extensions import Annotated

from folio.contexts.intake import ConfigLoadError, load_config, normalize_config
from folio.contexts.intake.logger import setup_intake_logger
from folio.contexts.templating import format_resume_markdown, render_resume_html
from folio.contexts.templating.logger import log_output_written, setup_templating_logger
from folio.utils.logger import session_log_dir

app = typer.Typer(
    help="Normalize resume configurations and render them as markdown or HTML",
    add_completion=False,
    invoke_without_command=True,
)

ConfigOption = Annotated[
    Optional[str],
    typer.Option(
        "--config",
        "-c",
        help="Config file (tried verbatim, then under FOLIO_CONFIG_BASE_PATH). Default: embedded resume",
    ),
]
BasePathOption = Annotated[
    Optional[Path],
    typer.Option("--base-path", help="Base directory for relative config lookup"),
]
OutputOption = Annotated[
    Optional[Path],
    typer.Option("--output", "-o", help="Write to this file instead of stdout"),
]


def _load_document(command: str, config: Optional[str], base_path: Optional[Path]):
    """Load and normalize, exiting with code 1 if no configuration is available."""
    log_dir = session_log_dir(command)
    if command == "normalize":
        setup_intake_logger(log_dir)
    else:
        setup_templating_logger(log_dir, output_format=command)

    try:
        raw = load_config(config, base_path=base_path)
    except ConfigLoadError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return normalize_config(raw)


def _emit(text: str, output: Optional[Path], output_format: str) -> None:
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    log_output_written(output_format, output, len(text))
    typer.secho(f"✓ Wrote {output}", fg=typer.colors.GREEN, bold=True, err=True)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("normalize")
def normalize_command(
    config: ConfigOption = None,
    base_path: BasePathOption = None,
    output: OutputOption = None,
):
    """
    Print the canonical document as modern-schema YAML.

    Normalizing the printed YAML again yields the same document.

    Examples:\n

        $ render_resume.py normalize -c legacy.yml            # Convert legacy to modern
    """
    document = _load_document("normalize", config, base_path)
    _emit(
        yaml.safe_dump(document.to_dict(), allow_unicode=True, sort_keys=False),
        output,
        "yaml",
    )


@app.command("markdown")
def markdown_command(
    config: ConfigOption = None,
    base_path: BasePathOption = None,
    output: OutputOption = None,
):
    """
    Export the resume as markdown.

    Examples:\n

        $ render_resume.py markdown -c me.yml | pbcopy
    """
    document = _load_document("markdown", config, base_path)
    _emit(format_resume_markdown(document), output, "markdown")


@app.command("html")
def html_command(
    config: ConfigOption = None,
    base_path: BasePathOption = None,
    output: OutputOption = None,
    export: Annotated[
        bool,
        typer.Option("--export", help="Render the export variant (input for rasterization)"),
    ] = False,
):
    """
    Render the resume as a standalone HTML page.

    Examples:\n

        $ render_resume.py html -c me.yml -o outs/me.html

        $ render_resume.py html -c me.yml --export -o outs/export.html
    """
    document = _load_document("html", config, base_path)
    _emit(render_resume_html(document, export=export), output, "html")


if __name__ == "__main__":
    app()
