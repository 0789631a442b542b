"""CLI entry point for praia-news."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from praia_news import __version__
from praia_news.config import AppConfig, load_config
from praia_news.curator import parse_batch
from praia_news.errors import NewsPipelineError
from praia_news.models import NewsDocument
from praia_news.monitoring.logging import setup_logging
from praia_news.render import render_json
from praia_news.service import ARTIFACT_KINDS, NewsService

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"praia-news {__version__}")
        raise typer.Exit()


app = typer.Typer(name="praia-news", help="Praia Grande news: curate, preview and publish daily news artifacts")


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option("--version", "-V", help="Show version and exit", callback=_version_callback, is_eager=True)
    ] = False,
) -> None:
    """Praia Grande news: curate, preview and publish daily news artifacts."""


DEFAULT_CONFIG = Path("config.yaml")

ConfigOption = Annotated[Path, typer.Option("--config", "-c", help="Path to config.yaml")]


def _load_config(config_path: Path) -> AppConfig:
    """Load config from file, warning if the file does not exist."""
    if config_path.exists():
        return load_config(config_path)
    logger.warning("Config file %s not found, using defaults", config_path)
    return AppConfig()


def _build_service(config_path: Path) -> NewsService:
    cfg = _load_config(config_path)
    setup_logging(cfg.monitoring)
    return NewsService(cfg)


def _fail(exc: object) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


def _read_json(path: Path) -> str:
    if not path.exists():
        typer.echo(f"Error: {path} does not exist", err=True)
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


@app.command()
def preview(
    config: ConfigOption = DEFAULT_CONFIG,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write the preview document here")] = None,
    draft: Annotated[bool, typer.Option("--draft", help="Also save it as the operator draft")] = False,
) -> None:
    """Fetch today's news from the LLM and print the normalized document."""
    service = _build_service(config)
    try:
        document = service.preview()
        if draft:
            path = service.save_draft(document)
            typer.echo(f"Draft saved to {path}", err=True)
    except NewsPipelineError as exc:
        raise _fail(exc) from exc

    text = render_json(document)
    if output is None:
        typer.echo(text)
        return
    output.write_text(text, encoding="utf-8")
    typer.echo(f"Preview written to {output} ({len(document.content.items)} items)")


@app.command()
def publish(
    document_path: Annotated[Path, typer.Argument(help="Previewed document (JSON) to publish")],
    config: ConfigOption = DEFAULT_CONFIG,
    exclude: Annotated[
        list[str] | None, typer.Option("--exclude", "-x", help="Slug of an item to leave out (repeatable)")
    ] = None,
) -> None:
    """Publish the selected items of a previewed document."""
    service = _build_service(config)
    raw = _read_json(document_path)
    try:
        document = NewsDocument.from_dict(json.loads(raw))
    except ValueError as exc:
        raise _fail(f"{document_path} is not a valid news document: {exc}") from exc

    excluded = set(exclude or [])
    unknown = excluded - {item.slug for item in document.content.items}
    if unknown:
        typer.echo(f"Warning: no item with slug {', '.join(sorted(unknown))}", err=True)
    items = [
        item.model_copy(update={"selected": False}) if item.slug in excluded else item
        for item in document.content.items
    ]

    try:
        result = service.publish(document, items)
    except NewsPipelineError as exc:
        raise _fail(exc) from exc

    typer.echo(result.message)
    for kind in ARTIFACT_KINDS:
        typer.echo(f"  {kind}: {result.paths[kind]}")


@app.command()
def render(
    batch_path: Annotated[Path, typer.Argument(help="Raw LLM batch (JSON) to normalize and render")],
    config: ConfigOption = DEFAULT_CONFIG,
) -> None:
    """Normalize a saved raw batch and write all four artifacts without calling the LLM."""
    service = _build_service(config)
    raw = _read_json(batch_path)
    try:
        document = service.build_document(parse_batch(raw))
        result = service.publish(document)
    except NewsPipelineError as exc:
        raise _fail(exc) from exc

    typer.echo(result.message)
    for kind in ARTIFACT_KINDS:
        typer.echo(f"  {kind}: {result.paths[kind]}")


@app.command()
def dashboard(
    config: ConfigOption = DEFAULT_CONFIG,
    host: Annotated[str | None, typer.Option("--host", help="Dashboard bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", help="Dashboard port")] = None,
) -> None:
    """Start the operator's preview/publish web page."""
    service = _build_service(config)
    cfg = service.config

    resolved_host = host if host is not None else cfg.monitoring.dashboard_host
    resolved_port = port if port is not None else cfg.monitoring.dashboard_port

    try:
        import uvicorn  # noqa: PLC0415

        from praia_news.dashboard.api import create_app  # noqa: PLC0415
    except ImportError:
        typer.echo("Dashboard requires fastapi and uvicorn: pip install praia-news")
        raise typer.Exit(code=1)

    typer.echo(f"Dashboard starting on http://{resolved_host}:{resolved_port}")
    uvicorn.run(create_app(service), host=resolved_host, port=resolved_port, log_level="info")
