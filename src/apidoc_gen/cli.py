"""CLI entry point for apidoc-gen."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from apidoc_gen.config import settings
from apidoc_gen.errors import ApiDocError
from apidoc_gen.generator.blueprint import render_blueprint
from apidoc_gen.generator.monitor import build_monitor_config, write_monitor_config
from apidoc_gen.generator.testsource import TARGETS, UnitTestRenderer
from apidoc_gen.generator.validator import validate_files
from apidoc_gen.model.base import ApiDoc
from apidoc_gen.model.loader import load_docs


def _load(doc_path: Path) -> list[ApiDoc]:
    """Load API groups, turning input problems into CLI errors."""
    click.echo(f"Reading {doc_path}...")
    try:
        docs = load_docs(doc_path)
    except (ApiDocError, ValidationError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Found {len(docs)} groups, {sum(len(d.descriptions) for d in docs)} endpoints.")
    return docs


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log generation details.")
def main(verbose: bool):
    """apidoc-gen: generate API Blueprint documents and integration tests."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the Blueprint document.")
@click.option("--host", default=settings.HOST, required=settings.HOST is None, help="API host written into the document header.")
def blueprint(doc_path: Path, output: Path, host: str):
    """Render an API Blueprint document."""
    docs = _load(doc_path)
    content = render_blueprint(host, docs)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    click.echo(f"Blueprint saved to {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output directory for test files.")
@click.option("--host", default=settings.HOST, help="Fixed host used by every request.")
@click.option("--base-url", default=settings.BASE_URL, help="Default base URL when no fixed host is given.")
@click.option("--target", default=settings.TEST_TARGET, type=click.Choice(TARGETS), help="Test framework to generate.")
def tests(doc_path: Path, output: Path, host: str | None, base_url: str, target: str):
    """Generate one integration test file per API group."""
    docs = _load(doc_path)

    click.echo(f"Generating {target} tests...")
    renderer = UnitTestRenderer(host=host, base_url=base_url, target=target)
    try:
        files = renderer.render_all(docs)
    except ApiDocError as e:
        raise click.ClickException(str(e)) from e

    errors = validate_files(files)
    for fname, err in errors.items():
        click.echo(f"  Validation error in {fname}: {err}")

    output.mkdir(parents=True, exist_ok=True)
    for filename, content in files.items():
        file_path = output / filename
        file_path.write_text(content, encoding="utf-8")
        click.echo(f"  Created {file_path}")

    click.echo(f"Generated {len(files)} files in {output}")


@main.command()
@click.argument("doc_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output JSON file, e.g. api-v4.json.")
@click.option("--app-id", required=True, type=int, help="Application id of the monitored service.")
@click.option("--host", default=settings.HOST, required=settings.HOST is None, help="Host the monitor polls.")
@click.option("--time-interval", default=60, show_default=True, type=int, help="Polling interval.")
def monitor(doc_path: Path, output: Path, app_id: int, host: str, time_interval: int):
    """Write the monitoring configuration for the API groups."""
    docs = _load(doc_path)
    config = build_monitor_config(app_id=app_id, host=host, time_interval=time_interval, docs=docs)
    write_monitor_config(config, output)
    click.echo(f"Monitor config saved to {output}")
