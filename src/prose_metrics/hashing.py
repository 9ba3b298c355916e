from __future__ import annotations

import base64
import hashlib


def generate_content_hash(text: str) -> str:
    """Return the standard base64 encoding of the SHA-256 digest of the UTF-8 text."""
    # surrogatepass keeps lone surrogates (e.g. from JSON input) hashable.
    digest = hashlib.sha256(text.encode("utf-8", "surrogatepass")).digest()
    return base64.b64encode(digest).decode("ascii")
