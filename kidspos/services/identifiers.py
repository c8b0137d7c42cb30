from __future__ import annotations

import uuid


def generate_external_id(prefix: str) -> str:
    """`PREFIX-` plus 8 random hex chars, e.g. ITEM-3f9a1c2b."""
    return f"{prefix}-{uuid.uuid4().hex[:8]}"
