from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .units import CM, KG

ROTATION_AS_GIVEN = "LWH"
ROTATION_SWAPPED = "WLH"
ROTATION_MIXED = "mixed"

LAYOUT_ORIENTATION = "orientation"
LAYOUT_MIXED = "mixed"

PALLET_AS_GIVEN = "as_given"
PALLET_SWAPPED = "swapped"
PALLET_ORIENTATIONS = (PALLET_AS_GIVEN, PALLET_SWAPPED)

# Heuristic preferences for rotated and mixed layers; not derived values.
ROTATED_BONUS = 50.0
MIXED_ROW_BONUS = 75.0
EFFICIENCY_WEIGHT = 100.0
UTILIZATION_WEIGHT = 100.0


def _require_positive(owner: str, **values: float) -> None:
    for name, value in values.items():
        if not value > 0:
            raise ValueError(f"{owner}.{name} must be positive, got {value!r}")


@dataclass(frozen=True)
class Carton:
    """A rectangular carton and the quantity requested."""

    length: CM
    width: CM
    height: CM
    weight: KG
    quantity: int = 1

    def __post_init__(self) -> None:
        _require_positive(
            "carton",
            length=self.length,
            width=self.width,
            height=self.height,
            weight=self.weight,
        )
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"carton.quantity must be an integer, got {self.quantity!r}")
        if self.quantity < 0:
            raise ValueError(f"carton.quantity must not be negative, got {self.quantity}")

    @property
    def footprint(self) -> float:
        return self.length * self.width


@dataclass(frozen=True)
class Pallet:
    """Pallet base with its stacking limits.

    ``max_stack_height`` is measured from the floor and includes the pallet.
    """

    length: CM
    width: CM
    height: CM
    max_stack_height: CM = 200.0
    max_stack_weight: KG = 1000.0

    def __post_init__(self) -> None:
        _require_positive(
            "pallet",
            length=self.length,
            width=self.width,
            max_stack_height=self.max_stack_height,
            max_stack_weight=self.max_stack_weight,
        )
        if self.height < 0:
            raise ValueError(f"pallet.height must not be negative, got {self.height!r}")


@dataclass(frozen=True)
class Container:
    length: CM
    width: CM
    height: CM
    weight_capacity: KG = 26000.0

    def __post_init__(self) -> None:
        _require_positive(
            "container",
            length=self.length,
            width=self.width,
            height=self.height,
            weight_capacity=self.weight_capacity,
        )

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height


@dataclass(frozen=True)
class ScoringWeights:
    rotated_bonus: float = ROTATED_BONUS
    mixed_row_bonus: float = MIXED_ROW_BONUS
    efficiency_weight: float = EFFICIENCY_WEIGHT
    utilization_weight: float = UTILIZATION_WEIGHT


@dataclass(frozen=True)
class Settings:
    enable_rotation: bool = True
    consider_load_bearing: bool = False
    allow_pallet_rotation: bool = False
    scoring: ScoringWeights = field(default_factory=ScoringWeights)


@dataclass(frozen=True)
class Orientation:
    """Carton footprint used on the pallet floor."""

    length: CM
    width: CM
    height: CM
    rotation: str = ROTATION_AS_GIVEN

    @classmethod
    def from_carton(cls, carton: Carton) -> "Orientation":
        return cls(carton.length, carton.width, carton.height, ROTATION_AS_GIVEN)

    def swapped(self) -> "Orientation":
        rotation = (
            ROTATION_SWAPPED if self.rotation == ROTATION_AS_GIVEN else ROTATION_AS_GIVEN
        )
        return Orientation(self.width, self.length, self.height, rotation)


@dataclass(frozen=True)
class MixedRows:
    as_given: int
    swapped: int


@dataclass(frozen=True)
class CartonPlacement:
    x: CM
    y: CM
    z: CM
    layer: int
    rotation: str
    grid_x: int
    grid_y: int


@dataclass(frozen=True)
class LayerLayout:
    """Cartons stacked on one pallet."""

    kind: str
    cartons_per_layer: int
    max_layers: int
    total_cartons: int
    placements: Tuple[CartonPlacement, ...]
    efficiency: float
    utilization: float
    orientation: Optional[Orientation] = None
    rows: Optional[MixedRows] = None
    layers_by_height: int = 0
    layers_by_weight: int = 0
    layer_weight: KG = 0.0
    layer_height: CM = 0.0

    @property
    def is_empty(self) -> bool:
        return self.total_cartons <= 0

    @property
    def rotation(self) -> str:
        if self.orientation is None:
            return ROTATION_MIXED
        return self.orientation.rotation

    @property
    def stack_height(self) -> CM:
        """Height of the cartons alone, without the pallet."""
        return self.max_layers * self.layer_height

    @property
    def load_weight(self) -> KG:
        return self.layer_weight * self.max_layers

    def layer(self, index: int) -> Tuple[CartonPlacement, ...]:
        return tuple(p for p in self.placements if p.layer == index)


@dataclass(frozen=True)
class PalletPlacement:
    x: CM
    y: CM
    z: CM
    layer: int
    index: int


@dataclass(frozen=True)
class ContainerLayout:
    pallets_per_layer: int = 0
    max_pallet_layers: int = 0
    total_pallets: int = 0
    placements: Tuple[PalletPlacement, ...] = ()
    container_utilization: float = 0.0
    weight_utilization: float = 0.0
    orientation: str = PALLET_AS_GIVEN
    stack_height: CM = 0.0
    pallet_load_weight: KG = 0.0
    weight_limited_pallets: int = 0

    @classmethod
    def empty(cls, orientation: str = PALLET_AS_GIVEN) -> "ContainerLayout":
        return cls(orientation=orientation)

    @property
    def is_empty(self) -> bool:
        return self.total_pallets <= 0


@dataclass(frozen=True)
class Summary:
    """Headline numbers; ratios are percentages."""

    total_cartons: int
    cartons_placed: int
    remaining_cartons: int
    pallets_used: int
    containers_used: int
    efficiency: float
    space_utilization: float
    weight_utilization: float


@dataclass(frozen=True)
class Layout3D:
    """Read-only view handed to renderers."""

    pallet_layout: Optional[LayerLayout]
    container_layout: ContainerLayout
    carton: Carton
    pallet: Pallet
    container: Container
    scale: float = 0.01


@dataclass(frozen=True)
class OptimizationReport:
    carton: Carton
    pallet: Pallet
    container: Container
    settings: Settings
    pallet_layout: Optional[LayerLayout]
    container_layout: ContainerLayout
    carton_placements: Tuple[CartonPlacement, ...]
    pallet_placements: Tuple[PalletPlacement, ...]
    pallets_needed: int
    packing_efficiency: float
    space_utilization: float
    weight_utilization: float
    summary: Summary
    layout_3d: Layout3D

    @property
    def cartons_per_layer(self) -> int:
        return self.pallet_layout.cartons_per_layer if self.pallet_layout else 0

    @property
    def max_layers(self) -> int:
        return self.pallet_layout.max_layers if self.pallet_layout else 0

    @property
    def cartons_per_pallet(self) -> int:
        return self.pallet_layout.total_cartons if self.pallet_layout else 0
