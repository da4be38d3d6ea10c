"""Turn raw form records into engine inputs.

Records are plain mappings of strings or numbers keyed the way the input
forms name them (``maxStackHeight``, ``weightCapacity`` ...).  Defaults and
presets are resolved here, once, so the engine only ever sees complete
values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from palletizr_core.engine import generate_optimization_report
from palletizr_core.models import (
    Carton,
    Container,
    OptimizationReport,
    Pallet,
    ScoringWeights,
    Settings,
)
from palletizr_core.tracing import LayoutTracer
from palletizr_core.units import parse_float, parse_int
from palletizr_core.validation import VALIDATION_RULES, InputRangeError, validate_all

from .data.presets_repo import load_container_presets, load_pallet_presets
from .data.scoring import load_scoring

logger = logging.getLogger(__name__)

NON_NUMERIC_FIELDS = {"preset", "usePallets", "name"}

PALLET_DEFAULTS = {"maxStackHeight": 200.0, "maxStackWeight": 1000.0}
CONTAINER_DEFAULTS = {"weightCapacity": 26000.0}

SETTINGS_FIELDS = {
    "enableRotation": "enable_rotation",
    "considerLoadBearing": "consider_load_bearing",
    "allowPalletRotation": "allow_pallet_rotation",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class EngineInputs:
    carton: Carton
    pallet: Pallet
    container: Container
    settings: Settings


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _apply_preset(
    record: Mapping[str, Any], presets: Dict[str, dict]
) -> Tuple[Dict[str, Any], Optional[str]]:
    """Merge a preset under the record; returns ``(values, error)``."""
    code = record.get("preset")
    resolved: Dict[str, Any] = {}
    if code and code != "custom":
        preset = presets.get(code)
        if preset is None:
            return dict(record), f"Unknown preset {code!r}"
        resolved.update({k: v for k, v in preset.items() if k != "name"})
    resolved.update(record)
    return resolved, None


def _numeric_fields(record: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in record.items() if k not in NON_NUMERIC_FIELDS}


def _check_category(record: Mapping[str, Any], category: str) -> Dict[str, str]:
    numeric = _numeric_fields(record)
    errors = dict(validate_all(numeric, category).errors)
    for name in VALIDATION_RULES[category]:
        if name not in numeric and name not in errors:
            errors[name] = f"{name} is required"
    return errors


def build_inputs(
    carton_record: Mapping[str, Any],
    pallet_record: Mapping[str, Any],
    container_record: Mapping[str, Any],
    settings_record: Optional[Mapping[str, Any]] = None,
    scoring: Optional[ScoringWeights] = None,
) -> EngineInputs:
    """Validate every category and build complete engine inputs.

    Raises :class:`InputRangeError` listing every failing field.
    """
    pallet_resolved, pallet_preset_error = _apply_preset(pallet_record, load_pallet_presets())
    container_resolved, container_preset_error = _apply_preset(
        container_record, load_container_presets()
    )
    pallet_values = {**PALLET_DEFAULTS, **pallet_resolved}
    container_values = {**CONTAINER_DEFAULTS, **container_resolved}
    carton_values = dict(carton_record)

    errors: Dict[str, Dict[str, str]] = {}
    for category, values, preset_error in (
        ("carton", carton_values, None),
        ("pallet", pallet_values, pallet_preset_error),
        ("container", container_values, container_preset_error),
    ):
        found = _check_category(values, category)
        if preset_error:
            found["preset"] = preset_error
        if found:
            errors[category] = found

    quantity = None
    if "quantity" not in errors.get("carton", {}):
        try:
            quantity = parse_int(carton_values["quantity"])
        except ValueError:
            errors.setdefault("carton", {})["quantity"] = "quantity must be a whole number"

    settings_kwargs: Dict[str, Any] = {}
    for key, attr in SETTINGS_FIELDS.items():
        if settings_record is None or key not in settings_record:
            continue
        try:
            settings_kwargs[attr] = parse_bool(settings_record[key])
        except ValueError:
            errors.setdefault("settings", {})[key] = f"{key} must be true or false"

    if errors:
        logger.info("Rejected input: %s", errors)
        raise InputRangeError(errors)

    carton = Carton(
        length=parse_float(carton_values["length"]),
        width=parse_float(carton_values["width"]),
        height=parse_float(carton_values["height"]),
        weight=parse_float(carton_values["weight"]),
        quantity=quantity,
    )
    pallet = Pallet(
        length=parse_float(pallet_values["length"]),
        width=parse_float(pallet_values["width"]),
        height=parse_float(pallet_values["height"]),
        max_stack_height=parse_float(pallet_values["maxStackHeight"]),
        max_stack_weight=parse_float(pallet_values["maxStackWeight"]),
    )
    container = Container(
        length=parse_float(container_values["length"]),
        width=parse_float(container_values["width"]),
        height=parse_float(container_values["height"]),
        weight_capacity=parse_float(container_values["weightCapacity"]),
    )
    if scoring is None:
        scoring = load_scoring()
    settings = Settings(scoring=scoring, **settings_kwargs)
    return EngineInputs(carton, pallet, container, settings)


def optimize(
    carton_record: Mapping[str, Any],
    pallet_record: Mapping[str, Any],
    container_record: Mapping[str, Any],
    settings_record: Optional[Mapping[str, Any]] = None,
    *,
    scoring: Optional[ScoringWeights] = None,
    tracer: Optional[LayoutTracer] = None,
) -> OptimizationReport:
    inputs = build_inputs(
        carton_record, pallet_record, container_record, settings_record, scoring
    )
    report = generate_optimization_report(
        inputs.carton, inputs.pallet, inputs.container, inputs.settings, tracer
    )
    logger.info(
        "Placed %d of %d cartons on %d pallets",
        report.summary.cartons_placed,
        report.summary.total_cartons,
        report.summary.pallets_used,
    )
    return report
