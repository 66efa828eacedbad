"""
Serialization of schema lists into embeddable JSON-LD script blocks.
"""
import json
from typing import Any, Dict, Iterable

# Characters that could close the <script> element or start an entity
_SCRIPT_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
}


def dumps_schema(schema: Dict[str, Any]) -> str:
    """Compact JSON for one schema, safe to place inside a script element."""
    return json.dumps(schema, separators=(",", ":"), ensure_ascii=False).translate(_SCRIPT_ESCAPES)


def render_json_ld(schemas: Iterable[Dict[str, Any]]) -> str:
    """
    Render one ``<script type="application/ld+json">`` block per schema.

    Returns an empty string when there is nothing to embed.
    """
    return "\n".join(
        f'<script type="application/ld+json">{dumps_schema(schema)}</script>'
        for schema in schemas
    )
