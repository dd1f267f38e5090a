"""Entity tags for response bodies.

The tag is the quoted SHA-1 hex digest of the body's canonical text: strings
are hashed as-is, anything else as canonical JSON (sorted keys, no
whitespace), so equal payloads always get the same tag regardless of dict
insertion order.
"""

import hashlib
import json
from typing import Any


def canonical_json(data: Any) -> str:
    """Deterministic JSON: sorted keys, compact separators."""
    return json.dumps(data, sort_keys=True, separators=(",", ":"))


def compute_etag(body: Any) -> str:
    """Return the strong entity tag for body, e.g. '"a94a8f..."'.

    Args:
        body: A string, or a JSON-serializable value (dict, list, ...).
    """
    text = body if isinstance(body, str) else canonical_json(body)
    digest = hashlib.sha1(text.encode("utf-8")).hexdigest()
    return f'"{digest}"'
