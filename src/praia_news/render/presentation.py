"""Lookup tables and helpers shared by every renderer.

Category, relevance and engagement styling live here once; the HTML report
and the embeddable component both read from these tables.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Literal, TypedDict

from praia_news.models import RawNewsItem

EngagementBand = Literal["high", "medium", "low"]

HIGH_ENGAGEMENT: int = 80
MEDIUM_ENGAGEMENT: int = 50

FALLBACK_IMAGE = "praia-grande-geral.jpg"

CATEGORY_IMAGES: dict[str, str] = {
    "Política": "politica-praia-grande.jpg",
    "Turismo": "praia-turismo.jpg",
    "Infraestrutura": "obras-infraestrutura.jpg",
    "Segurança": "seguranca-publica.jpg",
    "Cultura": "cultura-eventos.jpg",
    "Economia": "economia-local.jpg",
    "Educação": "educacao-praia-grande.jpg",
    "Saúde": "saude-publica.jpg",
    "Meio Ambiente": "meio-ambiente.jpg",
    "Esportes": "esportes-praia-grande.jpg",
}

FALLBACK_CATEGORY_COLOR = "bg-gray-600"

CATEGORY_COLORS: dict[str, str] = {
    "Política": "bg-blue-600",
    "Turismo": "bg-cyan-600",
    "Infraestrutura": "bg-orange-600",
    "Segurança": "bg-red-600",
    "Cultura": "bg-purple-600",
    "Economia": "bg-green-600",
    "Educação": "bg-indigo-600",
    "Saúde": "bg-pink-600",
    "Meio Ambiente": "bg-emerald-600",
    "Esportes": "bg-yellow-600",
}

# Hex equivalents of CATEGORY_COLORS for the self-contained HTML report.
CATEGORY_HEX: dict[str, str] = {
    "Política": "#2563eb",
    "Turismo": "#0891b2",
    "Infraestrutura": "#ea580c",
    "Segurança": "#dc2626",
    "Cultura": "#9333ea",
    "Economia": "#16a34a",
    "Educação": "#4f46e5",
    "Saúde": "#db2777",
    "Meio Ambiente": "#059669",
    "Esportes": "#ca8a04",
}
FALLBACK_CATEGORY_HEX = "#4b5563"

RELEVANCE_STYLES: dict[str, str] = {
    "alta": "border-l-4 border-red-500 bg-red-50",
    "média": "border-l-4 border-yellow-500 bg-yellow-50",
    "baixa": "border-l-4 border-green-500 bg-green-50",
}

RELEVANCE_DOTS: dict[str, str] = {
    "alta": "bg-red-500",
    "média": "bg-yellow-500",
    "baixa": "bg-green-500",
}

# CSS class suffix per tier; the HTML report cannot rely on a non-ASCII class name.
RELEVANCE_CSS: dict[str, str] = {"alta": "alta", "média": "media", "baixa": "baixa"}

ENGAGEMENT_COLORS: dict[EngagementBand, str] = {
    "high": "text-green-600 bg-green-50",
    "medium": "text-yellow-600 bg-yellow-50",
    "low": "text-gray-600 bg-gray-50",
}

ENGAGEMENT_ICONS: dict[EngagementBand, str] = {"high": "🔥", "medium": "⭐", "low": "📌"}

RANK_MEDALS: dict[int, str] = {1: "🥇", 2: "🥈", 3: "🥉"}


class EngagementCounts(TypedDict):
    high: int
    medium: int
    low: int


class RelevanceCounts(TypedDict):
    alta: int
    média: int
    baixa: int


def image_for_category(category: str) -> str:
    """Placeholder image for a category; unknown categories share a generic image."""
    return CATEGORY_IMAGES.get(category, FALLBACK_IMAGE)


def category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, FALLBACK_CATEGORY_COLOR)


def category_hex(category: str) -> str:
    return CATEGORY_HEX.get(category, FALLBACK_CATEGORY_HEX)


def relevance_style(relevance: str) -> str:
    return RELEVANCE_STYLES.get(relevance, RELEVANCE_STYLES["baixa"])


def relevance_css(relevance: str) -> str:
    return RELEVANCE_CSS.get(relevance, "baixa")


def engagement_band(score: int | None) -> EngagementBand:
    """Classify a score: >=80 high, 50-79 medium, otherwise (absent included) low."""
    value = score or 0
    if value >= HIGH_ENGAGEMENT:
        return "high"
    if value >= MEDIUM_ENGAGEMENT:
        return "medium"
    return "low"


def engagement_color(score: int | None) -> str:
    return ENGAGEMENT_COLORS[engagement_band(score)]


def engagement_icon(score: int | None) -> str:
    return ENGAGEMENT_ICONS[engagement_band(score)]


def rank_medal(rank: int) -> str:
    """Medal for ranks 1-3, ``#n`` afterwards."""
    return RANK_MEDALS.get(rank, f"#{rank}")


def count_by_engagement(items: Iterable[RawNewsItem]) -> EngagementCounts:
    counts: EngagementCounts = {"high": 0, "medium": 0, "low": 0}
    for item in items:
        counts[engagement_band(item.engagement_score)] += 1
    return counts


def count_by_relevance(items: Iterable[RawNewsItem]) -> RelevanceCounts:
    counts: RelevanceCounts = {"alta": 0, "média": 0, "baixa": 0}
    for item in items:
        counts[item.relevance] += 1
    return counts


def format_date_br(value: str) -> str:
    """``2025-11-16`` -> ``16/11/2025``; unparseable input is returned as-is."""
    try:
        return datetime.fromisoformat(value).strftime("%d/%m/%Y")
    except (TypeError, ValueError):
        return value


def format_datetime_br(value: str) -> str:
    """ISO timestamp -> ``16/11/2025 14:30:00``; unparseable input is returned as-is."""
    try:
        return datetime.fromisoformat(value).strftime("%d/%m/%Y %H:%M:%S")
    except (TypeError, ValueError):
        return value


def collection_year(value: str) -> str:
    """Year of the collection timestamp, used in footers instead of the wall clock."""
    try:
        return str(datetime.fromisoformat(value).year)
    except (TypeError, ValueError):
        return value[:4] if value[:4].isdigit() else ""
