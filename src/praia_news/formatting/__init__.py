"""Normalization of raw LLM batches into the canonical news document."""

from praia_news.formatting.normalizer import enrich, normalize, normalize_selection
from praia_news.formatting.ranking import rank_by_engagement, select_headline
from praia_news.formatting.slug import generate_slug

__all__ = ["enrich", "generate_slug", "normalize", "normalize_selection", "rank_by_engagement", "select_headline"]
