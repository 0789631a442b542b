"""JSON artifact renderer."""

import json

from praia_news.models import NewsDocument


def render_json(document: NewsDocument) -> str:
    """Indented JSON with the wire keys in model order and non-ASCII text kept as-is."""
    return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)
