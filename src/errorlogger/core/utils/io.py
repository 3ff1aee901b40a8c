"""IO helpers."""
from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict

import yaml


def load_structured(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    data = p.read_text(encoding="utf-8")
    suffix = p.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(data) or {}
    if suffix == ".toml":
        return tomllib.loads(data)
    return json.loads(data)


def dump_toml_section(section: str, values: Dict[str, Any]) -> str:
    """Render a flat mapping as a single TOML table (strings, numbers, bools)."""
    lines = [f"[{section}]"]
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, bool):
            rendered = "true" if value else "false"
        elif isinstance(value, (int, float)):
            rendered = str(value)
        else:
            rendered = json.dumps(str(value))
        lines.append(f"{key} = {rendered}")
    return "\n".join(lines) + "\n"
