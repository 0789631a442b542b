"""Tests for config loading."""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from praia_news.config import AppConfig, load_config

SAMPLE_YAML = """\
llm:
  provider: anthropic
  model: claude-sonnet-4-5
  api_key_env: PRAIA_TEST_KEY
  timeout: 60

pipeline:
  headline_policy: first_high_relevance

output:
  directory: /tmp/praia
  json_name: "news-{date}.json"

monitoring:
  structured_logging: true
  dashboard_port: 9000
"""


def test_load_config_from_yaml(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(SAMPLE_YAML)
    config = load_config(config_file)
    assert config.llm.provider == "anthropic"
    assert config.llm.model == "claude-sonnet-4-5"
    assert config.llm.api_key_env == "PRAIA_TEST_KEY"
    assert config.llm.timeout == 60.0
    assert config.pipeline.headline_policy == "first_high_relevance"
    assert config.output.directory == "/tmp/praia"
    assert config.output.json_name == "news-{date}.json"
    assert config.output.html_name == "relatorio-{date}.html"
    assert config.monitoring.structured_logging is True
    assert config.monitoring.dashboard_port == 9000


def test_default_config() -> None:
    config = AppConfig()
    assert config.llm.provider == "openai"
    assert config.llm.model == "gpt-4o"
    assert config.pipeline.headline_policy == "best_engagement"
    assert config.pipeline.timezone == "America/Sao_Paulo"
    assert config.output.directory == "output"
    assert config.output.draft_name == "preview-temp.json"
    assert config.monitoring.dashboard_port == 8080


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")
    assert load_config(config_file) == AppConfig()


def test_unknown_headline_policy_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AppConfig(pipeline={"headline_policy": "random"})  # type: ignore[arg-type]


def test_unknown_provider_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AppConfig(llm={"provider": "gemini"})  # type: ignore[arg-type]


def test_dotenv_next_to_config_is_loaded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PRAIA_NEWS_DOTENV_PROBE", raising=False)
    (tmp_path / ".env").write_text("PRAIA_NEWS_DOTENV_PROBE=from-dotenv\n")
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")
    load_config(config_file)
    assert os.environ["PRAIA_NEWS_DOTENV_PROBE"] == "from-dotenv"
    monkeypatch.delenv("PRAIA_NEWS_DOTENV_PROBE")


def test_unknown_timezone_is_rejected() -> None:
    with pytest.raises(ValidationError, match="Unknown timezone"):
        AppConfig(pipeline={"timezone": "America/Atlantis"})  # type: ignore[arg-type]
