from __future__ import annotations

import json
from typing import Iterable


def normalize_tags(values: Iterable[str], allowed: Iterable[str] | None = None) -> list[str]:
    """Strip and de-duplicate tag names, keeping selection order.

    When ``allowed`` is given, every tag must be one of those names.
    """
    allowed_set = set(allowed) if allowed is not None else None
    result: list[str] = []
    for item in values:
        tag = str(item).strip()
        if not tag:
            continue
        if allowed_set is not None and tag not in allowed_set:
            raise ValueError(f"Unknown option: {tag}")
        if tag not in result:
            result.append(tag)
    return result


def load_tags(raw: str | None) -> list[str]:
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return []
    if not isinstance(data, list):
        return []
    return normalize_tags(str(item) for item in data if item is not None)


def dump_tags(values: Iterable[str] | None) -> str:
    if values is None:
        return json.dumps([])
    return json.dumps(normalize_tags(values), ensure_ascii=False)


def normalize_option_name(value: str | None) -> str:
    cleaned = " ".join((value or "").split())
    if not cleaned:
        raise ValueError("Option name is required")
    if len(cleaned) > 80:
        raise ValueError("Option name is too long")
    return cleaned
