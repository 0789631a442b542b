"""Pydantic models for raw LLM batches and the canonical news document.

Attribute names are English; the serialized form keeps the Portuguese keys
the UI layer and the published artifacts use (``titulo``, ``noticias``, ...).
Every model accepts either spelling on input.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

Relevance = Literal["alta", "média", "baixa"]

RELEVANCE_RANK: dict[str, int] = {"alta": 3, "média": 2, "baixa": 1}

_RELEVANCE_ALIASES: dict[str, Relevance] = {
    "alta": "alta",
    "high": "alta",
    "média": "média",
    "media": "média",
    "medium": "média",
    "baixa": "baixa",
    "low": "baixa",
}

DEFAULT_CATEGORY = "Outros"


def coerce_relevance(value: Any) -> Relevance:
    """Map free-form relevance labels onto the three tiers, defaulting to ``baixa``."""
    key = str(value or "").strip().lower()
    return _RELEVANCE_ALIASES.get(key, "baixa")


def coerce_score(value: Any) -> int | None:
    """Best-effort engagement score: int clamped to 0-100, or None when unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        score = int(round(float(value)))
    except (TypeError, ValueError, OverflowError):
        return None
    return max(0, min(100, score))


def _coerce_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return [str(v) for v in value if v is not None]


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class RawNewsItem(_WireModel):
    """One news item as returned by the LLM, before enrichment."""

    title: str = Field(default="", alias="titulo")
    summary: str = Field(default="", alias="resumo")
    category: str = Field(default=DEFAULT_CATEGORY, alias="categoria")
    relevance: Relevance = Field(default="baixa", alias="relevancia")
    source: str = Field(default="", alias="fonte")
    url: str | None = None
    published_date: str = Field(default="", alias="dataPublicacao")
    engagement_score: int | None = Field(default=None, alias="engagementScore")

    @field_validator("title", "summary", "source", "published_date", mode="before")
    @classmethod
    def _text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("category", mode="before")
    @classmethod
    def _category(cls, value: Any) -> str:
        return str(value).strip() if value else DEFAULT_CATEGORY

    @field_validator("relevance", mode="before")
    @classmethod
    def _relevance(cls, value: Any) -> Relevance:
        return coerce_relevance(value)

    @field_validator("url", mode="before")
    @classmethod
    def _url(cls, value: Any) -> str | None:
        if not value:
            return None
        return str(value).strip() or None

    @field_validator("engagement_score", mode="before")
    @classmethod
    def _score(cls, value: Any) -> int | None:
        return coerce_score(value)

    @model_serializer(mode="wrap")
    def _drop_absent_optionals(self, handler: Any) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        for key in ("url", "engagementScore", "engagement_score"):
            if key in data and data[key] is None:
                del data[key]
        return data

    @property
    def score(self) -> int:
        """Engagement score with absent treated as 0."""
        return self.engagement_score or 0


class NewsItem(RawNewsItem):
    """A raw item enriched with slug, placeholder image and the operator's selection flag."""

    slug: str
    image_placeholder: str = Field(alias="imagemPlaceholder")
    selected: bool = True

    def to_raw(self) -> RawNewsItem:
        return RawNewsItem.model_validate(self.model_dump(include=set(RawNewsItem.model_fields)))


class RawBatch(_WireModel):
    """The JSON object the LLM is asked to produce."""

    collected_at: str | None = Field(default=None, alias="dataColeta")
    declared_total: int | None = Field(default=None, alias="totalNoticias")
    items: list[RawNewsItem] = Field(default_factory=list, alias="noticias")
    highlighted_themes: list[str] = Field(default_factory=list, alias="temasEmDestaque")
    suggested_topics: list[str] = Field(default_factory=list, alias="sugestoesPautas")

    @field_validator("declared_total", mode="before")
    @classmethod
    def _total(cls, value: Any) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @field_validator("items", mode="before")
    @classmethod
    def _items(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("highlighted_themes", "suggested_topics", mode="before")
    @classmethod
    def _lists(cls, value: Any) -> list[str]:
        return _coerce_str_list(value)


class Metadata(_WireModel):
    collected_at: str = Field(alias="dataColeta")
    total: int = Field(alias="totalNoticias")
    city: str = Field(alias="cidade")
    state: str = Field(alias="estado")


class Sidebar(_WireModel):
    highlighted_themes: list[str] = Field(default_factory=list, alias="temasEmDestaque")
    suggested_topics: list[str] = Field(default_factory=list, alias="sugestoesPautas")

    @field_validator("highlighted_themes", "suggested_topics", mode="before")
    @classmethod
    def _lists(cls, value: Any) -> list[str]:
        return _coerce_str_list(value)


class Content(_WireModel):
    headline: NewsItem | None = Field(default=None, alias="manchetePrincipal")
    items: list[NewsItem] = Field(default_factory=list, alias="noticias")
    sidebar: Sidebar = Field(default_factory=Sidebar)


class Seo(_WireModel):
    title: str
    description: str
    keywords: str


class NewsDocument(_WireModel):
    """The canonical, ranked and enriched document every artifact is rendered from."""

    metadata: Metadata
    content: Content = Field(alias="conteudo")
    seo: Seo

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the wire (Portuguese) keys."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NewsDocument:
        return cls.model_validate(data)

    def selected_items(self) -> list[NewsItem]:
        return [item for item in self.content.items if item.selected]
