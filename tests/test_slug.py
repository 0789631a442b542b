"""Tests for slug generation."""

import re

import pytest

from praia_news.formatting.slug import FALLBACK_SLUG, generate_slug


def test_slug_strips_punctuation_and_lowercases() -> None:
    assert generate_slug("Praia Grande: Nova Ciclovia!") == "praia-grande-nova-ciclovia"


def test_slug_removes_accents() -> None:
    assert generate_slug("Educação e Saúde em Praia Grande") == "educacao-e-saude-em-praia-grande"


def test_slug_collapses_whitespace_and_hyphens() -> None:
    assert generate_slug("  Obras   na -- Avenida  Kennedy  ") == "obras-na-avenida-kennedy"


@pytest.mark.parametrize("title", ["", "   ", "!!!", "—", "🔥🔥"])
def test_slug_falls_back_when_nothing_remains(title: str) -> None:
    assert generate_slug(title) == FALLBACK_SLUG


@pytest.mark.parametrize(
    "title",
    [
        "Prefeitura anuncia nova ciclovia na orla",
        "Operação Verão: 1.500 policiais nas praias",
        "Tarifa de ônibus sobe para R$ 5,00",
        "Festival\tde\nVerão",
    ],
)
def test_slug_is_ascii_without_whitespace_or_uppercase(title: str) -> None:
    slug = generate_slug(title)
    assert re.fullmatch(r"[a-z0-9_-]+", slug)
    assert not slug.startswith("-")
    assert not slug.endswith("-")


def test_slug_is_idempotent() -> None:
    slug = generate_slug("Praia Grande: Nova Ciclovia!")
    assert generate_slug(slug) == slug


@pytest.mark.parametrize("title", ["Praia\u00a0Grande", "Praia\u2009Grande", "Praia \u00a0 Grande"])
def test_slug_treats_unicode_spaces_as_separators(title: str) -> None:
    assert generate_slug(title) == "praia-grande"
