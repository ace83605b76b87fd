"""CLI entry point for idl-endpoint."""

import logging
from pathlib import Path

import click
import yaml

from idl_endpoint.parser.base import Endpoint
from idl_endpoint.parser.declarations import parse_declarations
from idl_endpoint.parser.endpoint import parse_endpoint
from idl_endpoint.parser.errors import DeclarationFileError, ParseError

DEMO_NOTATION = "GET /register/{id:string}/{field:string}?type:string&order:string RQ -> RS"

OUTPUT_FORMATS = ["json", "yaml", "repr"]


def _render(endpoint: Endpoint, fmt: str) -> str:
    """Render a parsed endpoint in the requested output format."""
    if fmt == "yaml":
        return yaml.safe_dump(endpoint.model_dump(mode="json"), sort_keys=False).rstrip()
    elif fmt == "repr":
        return repr(endpoint)
    else:
        return endpoint.model_dump_json(indent=2)


def _parse_or_fail(notation: str) -> Endpoint:
    try:
        return parse_endpoint(notation)
    except ParseError as e:
        raise click.ClickException(f"{notation!r}: {e}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """idl-endpoint: parse endpoint notation into typed endpoint models."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@main.command()
@click.option("--format", "fmt", default="repr", type=click.Choice(OUTPUT_FORMATS), help="Output format.")
def demo(fmt: str):
    """Parse the built-in example notation and print the result."""
    click.echo(f"Parsing {DEMO_NOTATION}")
    click.echo(_render(_parse_or_fail(DEMO_NOTATION), fmt))


@main.command()
@click.argument("notations", nargs=-1, required=True)
@click.option("--format", "fmt", default="json", type=click.Choice(OUTPUT_FORMATS), help="Output format.")
def parse(notations: tuple[str, ...], fmt: str):
    """Parse one or more endpoint notations given as arguments."""
    for notation in notations:
        endpoint = _parse_or_fail(notation)
        click.echo(_render(endpoint, fmt))


@main.command()
@click.argument("file_path", type=click.Path(exists=True, path_type=Path))
@click.option("--format", "fmt", default="auto", type=click.Choice(["auto", "text", "yaml"]), help="Declaration file format.")
@click.pass_context
def check(ctx: click.Context, file_path: Path, fmt: str):
    """Parse every declaration in a file and report the failures."""
    try:
        results = parse_declarations(file_path, fmt)
    except DeclarationFileError as e:
        raise click.ClickException(f"{file_path}: {e}")

    failed = 0
    for result in results:
        source = result.declaration.source
        if result.ok:
            click.echo(f"  ok     {source}: {result.declaration.notation}")
        else:
            failed += 1
            click.echo(f"  error  {source}: {result.error}")

    click.echo(f"Checked {len(results)} declarations, {failed} failed.")
    if failed:
        ctx.exit(1)
