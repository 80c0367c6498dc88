"""JSON export of command results, in the same shape `catalog_loader` reads."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel


def export_models_json(*, models: Sequence[BaseModel], output_path: Path, key: str) -> Path:
    """Write `models` under `key` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {key: [model.model_dump(mode="json") for model in models]}
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
