"""Deterministic serialization helpers used by the CLI."""

from __future__ import annotations

import json
from typing import Any, Optional


def stable_json_dumps(obj: Any, indent: Optional[int] = None) -> str:
    separators = (",", ":") if indent is None else (",", ": ")
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=indent, separators=separators)


def model_payload(model: Any) -> Any:
    """JSON-ready dict for a pydantic model (enums reduced to their values)."""
    if hasattr(model, "model_dump"):
        return model.model_dump(mode="json")
    return json.loads(model.json())
