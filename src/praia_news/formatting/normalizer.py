"""Build the canonical :class:`NewsDocument` from a raw LLM batch.

Preview and publish share :func:`normalize`; publish only narrows the input
to the operator-selected items first (:func:`normalize_selection`).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime, timezone

from praia_news.config import HeadlinePolicy
from praia_news.errors import ValidationError
from praia_news.formatting.ranking import rank_by_engagement, select_headline
from praia_news.formatting.seo import build_seo
from praia_news.formatting.slug import generate_slug
from praia_news.models import Content, Metadata, NewsDocument, NewsItem, RawBatch, RawNewsItem, Sidebar
from praia_news.render.presentation import image_for_category

logger = logging.getLogger(__name__)

CITY = "Praia Grande"
STATE = "São Paulo"


def enrich(item: RawNewsItem) -> NewsItem:
    """Attach slug, placeholder image and a default-true ``selected`` flag."""
    return NewsItem.model_validate(
        {
            **item.model_dump(),
            "slug": generate_slug(item.title),
            "image_placeholder": image_for_category(item.category),
            "selected": True,
        }
    )


def normalize(
    batch: RawBatch,
    *,
    policy: HeadlinePolicy = "best_engagement",
    today: date | None = None,
) -> NewsDocument:
    """Rank, pick a headline, enrich and assemble the document for ``batch``."""
    ranked = rank_by_engagement(batch.items)
    # Headline policies see the ranked order, which publish reproduces from a preview.
    headline = select_headline(ranked, policy)

    items = [enrich(item) for item in ranked]
    sidebar = Sidebar(
        highlighted_themes=batch.highlighted_themes,
        suggested_topics=batch.suggested_topics,
    )
    seo = build_seo(ranked, batch.highlighted_themes, today=today or date.today())
    metadata = Metadata(
        collected_at=batch.collected_at or datetime.now(timezone.utc).isoformat(),
        total=batch.declared_total or len(ranked),
        city=CITY,
        state=STATE,
    )
    logger.debug("Normalized %d items (headline policy %s)", len(items), policy)
    return NewsDocument(
        metadata=metadata,
        content=Content(
            headline=enrich(headline) if headline is not None else None,
            items=items,
            sidebar=sidebar,
        ),
        seo=seo,
    )


def normalize_selection(
    document: NewsDocument,
    items: Sequence[NewsItem] | None = None,
    *,
    policy: HeadlinePolicy = "best_engagement",
    today: date | None = None,
) -> NewsDocument:
    """Re-run :func:`normalize` over the operator-selected items of ``document``.

    ``items`` overrides the document's own item list (e.g. an edited copy
    posted back by the UI). The resulting ``totalNoticias`` is the number of
    selected items, never the original batch count.

    Raises :class:`ValidationError` when nothing is selected.
    """
    candidates = document.content.items if items is None else items
    selected = [item for item in candidates if item.selected]
    if not selected:
        raise ValidationError("No news items selected for publication")

    batch = RawBatch(
        collected_at=document.metadata.collected_at,
        declared_total=len(selected),
        items=[item.to_raw() for item in selected],
        highlighted_themes=document.content.sidebar.highlighted_themes,
        suggested_topics=document.content.sidebar.suggested_topics,
    )
    return normalize(batch, policy=policy, today=today)
