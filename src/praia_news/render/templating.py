"""Source-text templating for the generated component and data module."""

import json
from string import Template
from typing import Any


class SourceTemplate(Template):
    """``string.Template`` with a ``%%`` delimiter, so ``$`` and braces in JS/TS pass through untouched."""

    delimiter = "%%"


def js_literal(value: Any) -> str:
    """Serialize ``value`` as a JSON literal, which is also valid JS/TS source."""
    return json.dumps(value, indent=2, ensure_ascii=False)
