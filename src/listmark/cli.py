"""Click CLI for listmark.

Commands:
    parse      — Markdown → tree JSON
    render     — Tree JSON → markdown
    normalize  — Markdown → tree → markdown
    stats      — Block statistics for a markdown file
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from listmark.config import Config
from listmark.exceptions import ListmarkError
from listmark.markdown import serialize
from listmark.pipeline import Converter
from listmark.tree.report import TreeReport


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a YAML configuration file.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Convert markdown with alphabetic ordered lists to and from a document tree."""
    try:
        config = Config.load(config_path)
    except ListmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)
    if verbose:
        config.verbose = True

    level = logging.DEBUG if config.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["converter"] = Converter(config)


@main.command()
@click.argument("input_md", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output",
    "output_json",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the tree JSON to this file instead of stdout.",
)
@click.pass_context
def parse(ctx: click.Context, input_md: Path, output_json: Path | None) -> None:
    """Parse a markdown file and output its tree as JSON."""
    converter: Converter = ctx.obj["converter"]

    try:
        if output_json is None:
            click.echo(converter.inspect(input_md))
        else:
            converter.save_tree(converter.parse_file(input_md), output_json)
            click.echo(f"Saved: {output_json}")
    except ListmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("tree_json", type=click.Path(exists=True, path_type=Path))
@click.argument("output_md", type=click.Path(path_type=Path), required=False)
@click.pass_context
def render(ctx: click.Context, tree_json: Path, output_md: Path | None) -> None:
    """Render a saved tree JSON file back to markdown."""
    converter: Converter = ctx.obj["converter"]

    try:
        if output_md is None:
            doc = converter.load_tree(tree_json)
            click.echo(serialize(doc, converter.config), nl=False)
        else:
            result = converter.from_tree(tree_json, output_md)
            click.echo(f"Generated: {result}")
    except ListmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("input_md", type=click.Path(exists=True, path_type=Path))
@click.argument("output_md", type=click.Path(path_type=Path), required=False)
@click.option("--report", is_flag=True, help="Echo block statistics to stderr.")
@click.pass_context
def normalize(
    ctx: click.Context,
    input_md: Path,
    output_md: Path | None,
    report: bool,
) -> None:
    """Rewrite a markdown file in canonical form."""
    converter: Converter = ctx.obj["converter"]

    try:
        if output_md is None:
            click.echo(converter.rewrite(input_md), nl=False)
        else:
            result = converter.normalize(input_md, output_md)
            click.echo(f"Generated: {result}")

        if report and converter.last_report:
            rpt = converter.last_report
            click.echo(
                f"Report: {rpt.paragraph_count} paragraphs, "
                f"{rpt.heading_count} headings, {rpt.list_count} lists, "
                f"{rpt.item_count} items",
                err=True,
            )
    except ListmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("input_md", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def stats(ctx: click.Context, input_md: Path) -> None:
    """Print block statistics for a markdown file as JSON."""
    converter: Converter = ctx.obj["converter"]

    try:
        doc = converter.parse_file(input_md)
        click.echo(TreeReport.from_doc(doc).to_json())
    except ListmarkError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)
