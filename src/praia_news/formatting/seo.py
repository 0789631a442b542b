"""SEO title, meta description and keywords."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from praia_news.models import RawNewsItem, Seo

DESCRIPTION_LIMIT: int = 155
ELLIPSIS = "..."
FALLBACK_DESCRIPTION = "Acompanhe as principais notícias de Praia Grande - SP atualizadas diariamente."
BASE_KEYWORDS: tuple[str, ...] = ("Praia Grande", "Praia Grande SP", "notícias Praia Grande")


def build_title(today: date) -> str:
    return f"Notícias de Praia Grande - {today.strftime('%d/%m/%Y')}"


def build_description(items: Sequence[RawNewsItem]) -> str:
    """First item's summary cut at 155 characters plus an ellipsis.

    The cut is a plain character slice, not word-aware.
    """
    if not items:
        return FALLBACK_DESCRIPTION
    return items[0].summary[:DESCRIPTION_LIMIT] + ELLIPSIS


def build_keywords(themes: Sequence[str]) -> str:
    return ", ".join([*BASE_KEYWORDS, *themes])


def build_seo(items: Sequence[RawNewsItem], themes: Sequence[str], *, today: date) -> Seo:
    return Seo(
        title=build_title(today),
        description=build_description(items),
        keywords=build_keywords(themes),
    )
