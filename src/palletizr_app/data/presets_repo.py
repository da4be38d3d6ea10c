import os
import xml.etree.ElementTree as ET
from functools import lru_cache
from typing import Dict

from .paths import containers_xml_path, pallets_xml_path

PALLET_FIELDS = ("length", "width", "height")
CONTAINER_FIELDS = ("length", "width", "height", "weightCapacity")


def _load_presets(path: str, tag: str, fields: tuple) -> Dict[str, dict]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"No {tag} catalog at {path}")
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ValueError(f"{tag} catalog {path} is not valid XML: {e}") from e
    presets: Dict[str, dict] = {}
    for node in root.findall(tag):
        code = node.get("code")
        if not code:
            raise ValueError(f"{tag} without a code in {path}: {node.attrib}")
        try:
            preset = {name: float(node.get(name)) for name in fields}
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid {tag} data '{node.attrib}': {e}")
        preset["name"] = node.get("name", code)
        presets[code] = preset
    return presets


@lru_cache(maxsize=None)
def load_pallet_presets() -> Dict[str, dict]:
    """Return pallet presets {code: {name, length, width, height}}."""
    return _load_presets(pallets_xml_path(), "pallet", PALLET_FIELDS)


@lru_cache(maxsize=None)
def load_container_presets() -> Dict[str, dict]:
    """Return container presets {code: {name, length, width, height, weightCapacity}}."""
    return _load_presets(containers_xml_path(), "container", CONTAINER_FIELDS)


def clear_preset_cache() -> None:
    load_pallet_presets.cache_clear()
    load_container_presets.cache_clear()
