"""CLI for blazor-graph."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from blazor_graph import __version__
from blazor_graph.config import ConfigError, Settings, load_settings
from blazor_graph.layout import compute_layout
from blazor_graph.parser import ExtractionError, build_relation, read_relation
from blazor_graph.render import render_mermaid, render_svg
from blazor_graph.themes import THEMES


@click.group()
@click.version_option(version=__version__)
@click.option("-c", "--config", "config_path", type=click.Path(path_type=Path),
              default=None, help="YAML settings file.")
@click.option("-v", "--verbose", is_flag=True, help="Log layout decisions.")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """blazor-graph: Diagram which Blazor components use which."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        ctx.obj = load_settings(config_path)
    except ConfigError as e:
        raise click.ClickException(f"Invalid settings: {e}")


def _relation_for(settings: Settings, directory: Path | None, starting_node: str | None):
    source = directory or settings.directory
    if source is None:
        raise click.UsageError("No component directory given (argument or 'directory' setting).")
    try:
        return build_relation(
            source,
            rules=settings.rules,
            starting_node=starting_node or settings.starting_node,
        )
    except ExtractionError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument("directory", type=click.Path(path_type=Path), required=False)
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to the svg_file_name setting.")
@click.option("--mermaid", "mermaid_output", type=click.Path(path_type=Path), default=None,
              help="Also write a Mermaid diagram to this path.")
@click.option("--starting-node", default=None, help="Component to lay out first.")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="classic",
              help="Visual theme (default: classic)")
@click.option("--scale", type=float, default=96.0,
              help="SVG pixels per layout unit (default: 96)")
@click.pass_obj
def render(
    settings: Settings,
    directory: Path | None,
    output: Path | None,
    mermaid_output: Path | None,
    starting_node: str | None,
    theme: str,
    scale: float,
) -> None:
    """Lay out the components found in DIRECTORY and render them to SVG."""
    relation = _relation_for(settings, directory, starting_node)
    result = compute_layout(relation, settings.layout, settings.rules)

    svg = render_svg(result.nodes, settings.layout, THEMES[theme], settings.rules, scale=scale)
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = Path(settings.svg_file_name)
    output.write_text(svg)
    click.echo(f"Rendered {len(result.nodes)} components, "
               f"{len(result.graph.edges)} links, "
               f"{len(result.grid.rows)} grid rows -> {output}")

    if mermaid_output is not None:
        mermaid_output.write_text(
            render_mermaid(relation, settings.rules, settings.vendor_component_color)
        )
        click.echo(f"Mermaid dependency graph -> {mermaid_output}")


@cli.command()
@click.argument("directory", type=click.Path(path_type=Path), required=False)
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output file path. Defaults to the mermaid_file_name setting.")
@click.option("--starting-node", default=None, help="Component to list first.")
@click.pass_obj
def mermaid(
    settings: Settings,
    directory: Path | None,
    output: Path | None,
    starting_node: str | None,
) -> None:
    """Write a Mermaid dependency graph for the components in DIRECTORY."""
    relation = _relation_for(settings, directory, starting_node)
    text = render_mermaid(relation, settings.rules, settings.vendor_component_color)

    if output is None:
        output = Path(settings.mermaid_file_name)
    output.write_text(text)
    click.echo(f"Mermaid dependency graph generated in '{output}'.")


@cli.command()
@click.argument("relation_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Write positions here instead of standard output.")
@click.pass_obj
def layout(settings: Settings, relation_file: Path, output: Path | None) -> None:
    """Lay out a JSON adjacency relation and print positions as JSON."""
    try:
        relation = read_relation(relation_file)
    except ValueError as e:
        raise click.ClickException(f"Invalid relation file: {e}")

    result = compute_layout(relation, settings.layout, settings.rules)
    payload = {
        "card_width": settings.layout.card_width,
        "card_height": settings.layout.card_height,
        "nodes": [node.to_dict() for node in result.nodes],
        "unplaced": result.unplaced,
    }
    text = json.dumps(payload, indent=2) + "\n"

    if output is None:
        click.echo(text, nl=False)
    else:
        output.write_text(text)
        click.echo(f"Wrote {len(result.nodes)} positions -> {output}")


@cli.command()
@click.argument("directory", type=click.Path(path_type=Path), required=False)
@click.option("--starting-node", default=None, help="Component to lay out first.")
@click.pass_obj
def info(settings: Settings, directory: Path | None, starting_node: str | None) -> None:
    """Show the component graph and grid for DIRECTORY."""
    relation = _relation_for(settings, directory, starting_node)
    result = compute_layout(relation, settings.layout, settings.rules)
    rules = settings.rules

    click.echo(f"Components: {len(result.graph)}")
    click.echo(f"Links: {len(result.graph.edges)}")
    click.echo(f"Roots: {', '.join(result.roots) or '(none)'}")
    vendors = [n for n in result.graph.names if rules.is_vendor(n)]
    states = [n for n in result.graph.names if rules.is_state(n)]
    click.echo(f"Vendor components: {len(vendors)}")
    click.echo(f"State components: {len(states)}")
    if result.unplaced:
        click.echo(f"Not laid out: {', '.join(result.unplaced)}")
    table = result.grid.format_table()
    if table:
        click.echo(table)
