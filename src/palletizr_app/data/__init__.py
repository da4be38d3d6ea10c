from .paths import containers_xml_path, pallets_xml_path, scoring_yaml_path
from .presets_repo import (
    clear_preset_cache,
    load_container_presets,
    load_pallet_presets,
)
from .scoring import load_scoring

__all__ = [
    "clear_preset_cache",
    "containers_xml_path",
    "load_container_presets",
    "load_pallet_presets",
    "load_scoring",
    "pallets_xml_path",
    "scoring_yaml_path",
]
