"""Configuration loading and validation."""

from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

HeadlinePolicy = Literal["best_engagement", "first_high_relevance"]


class LLMConfig(BaseModel):
    """LLM provider used to curate the raw news batch."""

    provider: Literal["openai", "anthropic"] = "openai"
    model: str = "gpt-4o"
    api_key_env: str | None = None
    base_url: str | None = None
    temperature: float = 0.7
    max_tokens: int = 4096
    timeout: float = 120.0


class PipelineConfig(BaseModel):
    """Normalization settings."""

    headline_policy: HeadlinePolicy = "best_engagement"
    # Calendar day for SEO titles and artifact filenames.
    timezone: str = "America/Sao_Paulo"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone {value!r}") from exc
        return value


class OutputConfig(BaseModel):
    """Where and under which names published artifacts are written.

    Filename templates are formatted with ``date`` (``YYYY-MM-DD``).
    """

    directory: str = "output"
    json_name: str = "noticias-{date}.json"
    html_name: str = "relatorio-{date}.html"
    component_name: str = "NoticiasPraiaGrande-{date}.jsx"
    data_name: str = "noticias-data-{date}.ts"
    draft_name: str = "preview-temp.json"


class MonitoringConfig(BaseModel):
    """Logging and dashboard configuration."""

    structured_logging: bool = False
    log_file: str | None = None
    dashboard_host: str = "127.0.0.1"
    dashboard_port: int = 8080


class AppConfig(BaseModel):
    """Top-level application configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)


def load_config(path: Path) -> AppConfig:
    """Load config from a YAML file."""
    load_dotenv(path.parent / ".env", override=False)
    return AppConfig(**(yaml.safe_load(path.read_text()) or {}))
