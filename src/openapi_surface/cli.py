"""CLI entry point for openapi-surface."""

import json
import logging
from pathlib import Path

import click
import yaml

from openapi_surface.errors import SurfaceError, UnsupportedFormatError
from openapi_surface.parser.detect import detect_format
from openapi_surface.parser.swagger import load_document
from openapi_surface.surface.builder import build_model
from openapi_surface.surface.model import Model


def _build(doc_path: Path) -> Model:
    """Detect, load and translate an API document."""
    fmt = detect_format(doc_path)
    if fmt != "swagger2":
        raise UnsupportedFormatError(
            f"{doc_path}: only Swagger 2.0 documents are supported (detected: {fmt})"
        )
    return build_model(load_document(doc_path))


def _load_model(doc_path: Path) -> Model:
    try:
        return _build(doc_path)
    except SurfaceError as e:
        raise click.ClickException(str(e)) from e


def _render(model: Model, fmt: str) -> str:
    data = model.model_dump(mode="json")
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log translation details.")
def main(verbose: bool):
    """openapi-surface: translate Swagger 2.0 documents into a code generation model."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the model.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def build(doc_path: Path, output: Path, fmt: str):
    """Build the model of an API document and write it to a file."""
    click.echo(f"Parsing {doc_path}...")
    model = _load_model(doc_path)
    click.echo(f"Found {len(model.types)} types and {len(model.methods)} methods.")

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(_render(model, fmt), encoding="utf-8")
    click.echo(f"Model saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
def describe(doc_path: Path):
    """Print the types and methods of an API document."""
    model = _load_model(doc_path)
    click.echo(f"# {model.name}")

    click.echo("")
    click.echo("## Types")
    for t in model.types:
        kind = t.kind.value if t.kind else "-"
        click.echo(f"{t.name} ({kind})")
        if t.map_value_type is not None:
            click.echo(f"  map of {t.map_value_type}")
        for f in t.fields:
            position = f" [{f.position.value}]" if f.position else ""
            click.echo(f"  {f.name}: {f.type}{position}")

    click.echo("")
    click.echo("## Methods")
    for m in model.methods:
        click.echo(f"{m.http_method} {m.path} -> {m.name}")
        if m.parameters_type_name:
            click.echo(f"  parameters: {m.parameters_type_name}")
        if m.responses_type_name:
            click.echo(f"  responses: {m.responses_type_name}")
