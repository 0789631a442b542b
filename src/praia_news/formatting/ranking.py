"""Engagement ranking and headline selection.

Two headline policies are supported:

- ``best_engagement`` (default): highest engagement score, ties broken by
  relevance tier (alta > média > baixa), then by input order.
- ``first_high_relevance``: first ``alta`` item in the order given, else the
  first item. Engagement is ignored; the normalizer passes the ranked list.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from praia_news.config import HeadlinePolicy
from praia_news.models import RELEVANCE_RANK, RawNewsItem

T = TypeVar("T", bound=RawNewsItem)


def rank_by_engagement(items: Sequence[T]) -> list[T]:
    """Return a new list sorted by engagement score, highest first.

    Absent scores count as 0. The sort is stable, so equal scores keep
    their input order.
    """
    return sorted(items, key=lambda item: item.score, reverse=True)


def select_best_engagement(items: Sequence[T]) -> T | None:
    if not items:
        return None
    return sorted(
        items,
        key=lambda item: (item.score, RELEVANCE_RANK.get(item.relevance, 0)),
        reverse=True,
    )[0]


def select_first_high_relevance(items: Sequence[T]) -> T | None:
    if not items:
        return None
    return next((item for item in items if item.relevance == "alta"), items[0])


_SELECTORS = {
    "best_engagement": select_best_engagement,
    "first_high_relevance": select_first_high_relevance,
}


def select_headline(items: Sequence[T], policy: HeadlinePolicy = "best_engagement") -> T | None:
    """Pick the featured item from ``items`` according to ``policy``."""
    try:
        selector = _SELECTORS[policy]
    except KeyError:
        raise ValueError(f"Unknown headline policy {policy!r}; expected one of: {', '.join(_SELECTORS)}") from None
    return selector(items)
