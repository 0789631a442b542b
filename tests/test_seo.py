"""Tests for SEO metadata."""

from datetime import date

from praia_news.formatting.seo import (
    DESCRIPTION_LIMIT,
    FALLBACK_DESCRIPTION,
    build_description,
    build_keywords,
    build_seo,
    build_title,
)
from praia_news.models import RawNewsItem


def test_title_uses_brazilian_date() -> None:
    assert build_title(date(2025, 11, 6)) == "Notícias de Praia Grande - 06/11/2025"


def test_description_cuts_long_summary_at_limit() -> None:
    summary = "x" * 300
    description = build_description([RawNewsItem(titulo="t", resumo=summary)])
    assert description == "x" * DESCRIPTION_LIMIT + "..."
    assert len(description) == 158


def test_description_short_summary_still_gets_ellipsis() -> None:
    assert build_description([RawNewsItem(titulo="t", resumo="Curto.")]) == "Curto...."


def test_description_uses_first_item_only() -> None:
    items = [RawNewsItem(titulo="a", resumo="primeiro"), RawNewsItem(titulo="b", resumo="segundo")]
    assert build_description(items) == "primeiro..."


def test_description_falls_back_without_items() -> None:
    assert build_description([]) == FALLBACK_DESCRIPTION


def test_keywords_prefix_then_themes() -> None:
    assert build_keywords(["Verão", "Mobilidade"]) == (
        "Praia Grande, Praia Grande SP, notícias Praia Grande, Verão, Mobilidade"
    )
    assert build_keywords([]) == "Praia Grande, Praia Grande SP, notícias Praia Grande"


def test_build_seo_bounds_description() -> None:
    seo = build_seo([RawNewsItem(titulo="t", resumo="y" * 1000)], ["tema"], today=date(2025, 1, 2))
    assert seo.title.endswith("02/01/2025")
    assert len(seo.description) <= DESCRIPTION_LIMIT + 3
    assert seo.keywords.endswith(", tema")
