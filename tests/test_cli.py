"""Tests for CLI entry point."""

import json
from pathlib import Path

from typer.testing import CliRunner

from praia_news import __version__
from praia_news.cli import app
from praia_news.formatting.normalizer import normalize
from praia_news.models import RawBatch
from praia_news.render import render_json

runner = CliRunner()


def _write_config(tmp_path: Path) -> Path:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"output:\n  directory: {tmp_path / 'out'}\n")
    return config_path


def test_cli_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"praia-news {__version__}" in result.stdout


def test_cli_version_short():
    result = runner.invoke(app, ["-V"])
    assert result.exit_code == 0
    assert "praia-news" in result.stdout


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("preview", "publish", "render", "dashboard"):
        assert command in result.stdout


def test_cli_preview_without_key_fails(tmp_path, monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("llm:\n  provider: openai\n  api_key_env: PRAIA_NEWS_TEST_MISSING_KEY\n")
    result = runner.invoke(app, ["preview", "--config", str(config_path)])
    assert result.exit_code == 1
    assert "PRAIA_NEWS_TEST_MISSING_KEY is not set" in result.output


def test_cli_render_writes_artifacts(tmp_path, raw_payload):
    batch_path = tmp_path / "batch.json"
    batch_path.write_text(json.dumps(raw_payload, ensure_ascii=False), encoding="utf-8")

    result = runner.invoke(app, ["render", str(batch_path), "--config", str(_write_config(tmp_path))])
    assert result.exit_code == 0, result.output
    assert "3 notícia(s)" in result.stdout
    names = sorted(p.suffix for p in (tmp_path / "out").iterdir())
    assert names == [".html", ".json", ".jsx", ".ts"]


def test_cli_render_malformed_batch(tmp_path):
    batch_path = tmp_path / "batch.json"
    batch_path.write_text("not json")
    result = runner.invoke(app, ["render", str(batch_path), "--config", str(_write_config(tmp_path))])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_cli_publish_with_exclusions(tmp_path, raw_payload):
    document = normalize(RawBatch.model_validate(raw_payload))
    draft_path = tmp_path / "draft.json"
    draft_path.write_text(render_json(document), encoding="utf-8")
    excluded = document.content.items[0].slug

    result = runner.invoke(
        app, ["publish", str(draft_path), "--exclude", excluded, "--config", str(_write_config(tmp_path))]
    )
    assert result.exit_code == 0, result.output
    assert "2 notícia(s)" in result.stdout
    published = next((tmp_path / "out").glob("noticias-*.json"))
    data = json.loads(published.read_text(encoding="utf-8"))
    assert data["metadata"]["totalNoticias"] == 2
    assert excluded not in {item["slug"] for item in data["conteudo"]["noticias"]}


def test_cli_publish_everything_excluded(tmp_path, raw_payload):
    document = normalize(RawBatch.model_validate(raw_payload))
    draft_path = tmp_path / "draft.json"
    draft_path.write_text(render_json(document), encoding="utf-8")
    args = ["publish", str(draft_path), "--config", str(_write_config(tmp_path))]
    for item in document.content.items:
        args += ["--exclude", item.slug]

    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert "No news items selected" in result.output
    assert not (tmp_path / "out").exists()


def test_cli_publish_missing_file(tmp_path):
    result = runner.invoke(app, ["publish", str(tmp_path / "nope.json"), "--config", str(_write_config(tmp_path))])
    assert result.exit_code == 1
