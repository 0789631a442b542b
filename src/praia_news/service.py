"""Preview and publish entry points.

``preview`` fetches a batch from the LLM and returns the normalized document
without touching the filesystem. ``publish`` narrows a previewed document
to the operator-selected items, renormalizes it with the same normalizer,
renders the four artifacts and writes them as one set.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from zoneinfo import ZoneInfo

from praia_news.config import AppConfig
from praia_news.curator import NewsCurator
from praia_news.errors import DraftError
from praia_news.formatting.normalizer import normalize, normalize_selection
from praia_news.models import NewsDocument, NewsItem, RawBatch
from praia_news.monitoring.logging import log_event
from praia_news.render import render_component, render_data_module, render_html_report, render_json
from praia_news.sink import ArtifactSink

logger = logging.getLogger(__name__)

ARTIFACT_KINDS: tuple[str, ...] = ("json", "html", "component", "data")


@dataclass
class PublishResult:
    """Outcome of a successful publish."""

    document: NewsDocument
    files: dict[str, str]
    paths: dict[str, Path] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return len(self.document.content.items)

    @property
    def message(self) -> str:
        return f"{self.total} notícia(s) selecionada(s) publicada(s) com sucesso"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NewsService:
    """Glue between the LLM curator, the normalizer, the renderers and the sink."""

    def __init__(
        self,
        config: AppConfig,
        *,
        curator: NewsCurator | None = None,
        sink: ArtifactSink | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._config = config
        self._curator = curator
        self._sink = sink or ArtifactSink(Path(config.output.directory))
        self._clock = clock

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def sink(self) -> ArtifactSink:
        return self._sink

    def _local_date(self, moment: datetime) -> date:
        """Calendar day of ``moment`` in the configured newsroom timezone."""
        return moment.astimezone(ZoneInfo(self._config.pipeline.timezone)).date()

    def _get_curator(self) -> NewsCurator:
        if self._curator is None:
            self._curator = NewsCurator(self._config.llm)
        return self._curator

    # ------------------------------------------------------------------
    # Preview
    # ------------------------------------------------------------------

    def build_document(self, batch: RawBatch) -> NewsDocument:
        """Normalize an already-fetched raw batch."""
        return normalize(batch, policy=self._config.pipeline.headline_policy, today=self._local_date(self._clock()))

    def preview(self) -> NewsDocument:
        """Fetch a fresh batch from the LLM and normalize it. Writes nothing."""
        now = self._clock()
        batch = self._get_curator().fetch_batch(now=now)
        document = normalize(batch, policy=self._config.pipeline.headline_policy, today=self._local_date(now))
        log_event(
            logger,
            "preview_ready",
            "Preview ready: %d items",
            len(document.content.items),
            total=document.metadata.total,
            headline=document.content.headline.slug if document.content.headline else None,
        )
        return document

    def save_draft(self, document: NewsDocument) -> Path:
        """Persist an operator's in-progress preview (selection flags included)."""
        return self._sink.write(self._config.output.draft_name, render_json(document))

    def load_draft(self) -> NewsDocument | None:
        """Read back the saved draft, or None when there is none.

        Raises :class:`~praia_news.errors.DraftError` when the file is not a
        readable news document.
        """
        path = self._sink.path_for(self._config.output.draft_name)
        if not path.exists():
            return None
        try:
            return NewsDocument.from_dict(json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError) as exc:
            raise DraftError(f"Saved draft {path.name} is unreadable: {exc}") from exc

    # ------------------------------------------------------------------
    # Publish
    # ------------------------------------------------------------------

    def artifact_names(self, day: str) -> dict[str, str]:
        """Filenames per artifact kind for the given ``YYYY-MM-DD`` day."""
        output = self._config.output
        templates = {
            "json": output.json_name,
            "html": output.html_name,
            "component": output.component_name,
            "data": output.data_name,
        }
        return {kind: template.format(date=day) for kind, template in templates.items()}

    @staticmethod
    def render_artifacts(document: NewsDocument) -> dict[str, str]:
        """Render every artifact kind for ``document``."""
        return {
            "json": render_json(document),
            "html": render_html_report(document),
            "component": render_component(document),
            "data": render_data_module(document),
        }

    def publish(self, document: NewsDocument, items: Sequence[NewsItem] | None = None) -> PublishResult:
        """Publish the selected items of ``document`` (or of ``items`` when given).

        Raises :class:`~praia_news.errors.ValidationError` before writing
        anything when no item is selected, and
        :class:`~praia_news.errors.ArtifactWriteError` if the artifact set
        cannot be written.
        """
        today = self._local_date(self._clock())
        final = normalize_selection(
            document,
            items,
            policy=self._config.pipeline.headline_policy,
            today=today,
        )
        names = self.artifact_names(today.isoformat())
        rendered = self.render_artifacts(final)
        paths = self._sink.write_all({names[kind]: rendered[kind] for kind in ARTIFACT_KINDS})
        try:
            self._sink.remove(self._config.output.draft_name)
        except OSError as exc:
            logger.warning("Published, but could not remove draft %s: %s", self._config.output.draft_name, exc)
        log_event(
            logger,
            "published",
            "Published %d items to %s",
            len(final.content.items),
            self._sink.directory,
            files=sorted(names.values()),
        )
        return PublishResult(
            document=final,
            files=names,
            paths={kind: paths[names[kind]] for kind in ARTIFACT_KINDS},
        )
