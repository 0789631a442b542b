"""URL slug generation for news titles."""

import re
import unicodedata

FALLBACK_SLUG = "noticia"

# Unicode whitespace (NBSP included) becomes a hyphen before the ASCII-only strip.
_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w-]", re.ASCII)
_HYPHENS = re.compile(r"-+")


def generate_slug(title: str) -> str:
    """Turn a title into a lowercase, accent-free, hyphenated identifier.

    ``"Praia Grande: Nova Ciclovia!"`` becomes ``"praia-grande-nova-ciclovia"``.
    Titles that normalize to nothing get :data:`FALLBACK_SLUG`.
    """
    decomposed = unicodedata.normalize("NFD", title.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    slug = _WHITESPACE.sub("-", stripped)
    slug = _NON_WORD.sub("", slug)
    slug = _HYPHENS.sub("-", slug).strip("-")
    return slug or FALLBACK_SLUG
