from __future__ import annotations

import os
from dataclasses import fields
from typing import Optional

import yaml

from palletizr_core.models import ScoringWeights

from .paths import scoring_yaml_path


def load_scoring(path: Optional[str] = None) -> ScoringWeights:
    """Read scoring weights from YAML; missing keys keep their defaults."""
    path = path or scoring_yaml_path()
    if not os.path.exists(path):
        return ScoringWeights()
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Scoring settings in {path} must be a mapping")

    values = {}
    for item in fields(ScoringWeights):
        if item.name not in loaded:
            continue
        raw = loaded[item.name]
        if isinstance(raw, bool):
            raise ValueError(f"Invalid value for {item.name} in {path}: {raw!r}")
        try:
            values[item.name] = float(raw)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid value for {item.name} in {path}: {raw!r}")
    return ScoringWeights(**values)
