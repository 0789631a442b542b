"""Tests for building the canonical document from a raw batch."""

from datetime import date

import pytest

from praia_news.errors import ValidationError
from praia_news.formatting.normalizer import CITY, STATE, enrich, normalize, normalize_selection
from praia_news.models import RawBatch, RawNewsItem

TODAY = date(2025, 11, 16)


def _alta_not_on_top(payload: dict) -> RawBatch:
    """Batch whose only `alta` item comes first in input order but ranks last."""
    noticias = payload["noticias"]
    noticias[1]["relevancia"] = "média"
    payload["noticias"] = [noticias[2], noticias[0], noticias[1]]
    return RawBatch.model_validate(payload)


def test_enrich_adds_slug_image_and_selection() -> None:
    item = enrich(RawNewsItem(titulo="Praia Grande: Nova Ciclovia!", categoria="Turismo"))
    assert item.slug == "praia-grande-nova-ciclovia"
    assert item.image_placeholder == "praia-turismo.jpg"
    assert item.selected is True


class TestNormalize:
    def test_end_to_end(self, raw_batch: RawBatch) -> None:
        document = normalize(raw_batch, today=TODAY)

        scores = [item.engagement_score for item in document.content.items]
        assert scores == [85, 72, 68]
        assert document.metadata.total == 3
        assert document.metadata.city == CITY
        assert document.metadata.state == STATE
        assert document.metadata.collected_at == "2025-11-16T14:30:00+00:00"

        headline = document.content.headline
        assert headline is not None
        assert headline.title == "Festival de Verão 2025 confirma atrações"
        assert headline.slug == "festival-de-verao-2025-confirma-atracoes"

        assert all(item.selected for item in document.content.items)
        assert document.content.sidebar.highlighted_themes == ["Verão 2025", "Mobilidade", "Segurança"]
        assert document.seo.title == "Notícias de Praia Grande - 16/11/2025"
        assert document.seo.description.startswith("O Festival de Verão")
        assert document.seo.keywords.endswith("Verão 2025, Mobilidade, Segurança")

    def test_first_high_relevance_policy(self, raw_payload: dict) -> None:
        document = normalize(_alta_not_on_top(raw_payload), policy="first_high_relevance", today=TODAY)
        assert document.content.headline is not None
        assert document.content.headline.title == "Operação Verão reforça policiamento"
        # Ranking is unaffected by the headline policy.
        assert [i.engagement_score for i in document.content.items] == [85, 72, 68]

    def test_missing_declared_total_falls_back_to_count(self, raw_payload: dict) -> None:
        del raw_payload["totalNoticias"]
        document = normalize(RawBatch.model_validate(raw_payload), today=TODAY)
        assert document.metadata.total == 3

    def test_declared_total_is_kept_when_present(self, raw_payload: dict) -> None:
        raw_payload["totalNoticias"] = 12
        document = normalize(RawBatch.model_validate(raw_payload), today=TODAY)
        assert document.metadata.total == 12

    def test_missing_collection_time_is_filled(self, raw_payload: dict) -> None:
        del raw_payload["dataColeta"]
        document = normalize(RawBatch.model_validate(raw_payload), today=TODAY)
        assert document.metadata.collected_at

    def test_empty_batch(self) -> None:
        document = normalize(RawBatch(), today=TODAY)
        assert document.content.items == []
        assert document.content.headline is None
        assert document.metadata.total == 0
        assert document.seo.description.startswith("Acompanhe as principais notícias")

    def test_does_not_mutate_input(self, raw_batch: RawBatch) -> None:
        before = raw_batch.model_dump()
        normalize(raw_batch, today=TODAY)
        assert raw_batch.model_dump() == before


class TestNormalizeSelection:
    def test_total_is_selected_count(self, raw_batch: RawBatch) -> None:
        preview = normalize(raw_batch, today=TODAY)
        items = list(preview.content.items)
        items[0] = items[0].model_copy(update={"selected": False})

        final = normalize_selection(preview, items, today=TODAY)

        assert final.metadata.total == 2
        assert [i.engagement_score for i in final.content.items] == [72, 68]
        assert final.content.headline is not None
        assert final.content.headline.engagement_score == 72
        assert final.metadata.collected_at == preview.metadata.collected_at
        assert final.content.sidebar == preview.content.sidebar
        assert final.seo.description.startswith("A Prefeitura")

    def test_uses_document_items_by_default(self, raw_batch: RawBatch) -> None:
        preview = normalize(raw_batch, today=TODAY)
        final = normalize_selection(preview, today=TODAY)
        assert final.metadata.total == 3
        assert final.content.items == preview.content.items

    def test_nothing_selected_raises(self, raw_batch: RawBatch) -> None:
        preview = normalize(raw_batch, today=TODAY)
        items = [item.model_copy(update={"selected": False}) for item in preview.content.items]
        with pytest.raises(ValidationError, match="No news items selected"):
            normalize_selection(preview, items, today=TODAY)

    def test_empty_preview_raises(self) -> None:
        with pytest.raises(ValidationError):
            normalize_selection(normalize(RawBatch(), today=TODAY), today=TODAY)


@pytest.mark.parametrize(
    ("policy", "expected"),
    [
        ("best_engagement", "Festival de Verão 2025 confirma atrações"),
        ("first_high_relevance", "Operação Verão reforça policiamento"),
    ],
)
def test_publish_keeps_the_previewed_headline(raw_payload: dict, policy: str, expected: str) -> None:
    preview = normalize(_alta_not_on_top(raw_payload), policy=policy, today=TODAY)  # type: ignore[arg-type]
    final = normalize_selection(preview, policy=policy, today=TODAY)  # type: ignore[arg-type]

    assert preview.content.headline is not None
    assert final.content.headline is not None
    assert preview.content.headline.title == expected
    assert final.content.headline == preview.content.headline
    assert final.content.items == preview.content.items
