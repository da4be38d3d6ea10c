import logging

import pytest

from palletizr_core import generate_optimization_report
from palletizr_core.engine import compose
from palletizr_core.models import Carton, Container, ContainerLayout, Pallet, Settings
from palletizr_core.tracing import RecordingTracer


def test_scenario_rotation_enabled(carton, euro_pallet, container_40ft, rotation_on):
    report = generate_optimization_report(carton, euro_pallet, container_40ft, rotation_on)

    assert report.cartons_per_layer == 6
    assert report.max_layers == 7
    assert report.cartons_per_pallet == 42
    assert report.pallets_needed == 5
    summary = report.summary
    assert summary.total_cartons == 200
    assert summary.cartons_placed == 200
    assert summary.remaining_cartons == 0
    assert summary.pallets_used == 5
    assert summary.containers_used == 1
    assert summary.efficiency == pytest.approx(100.0)
    assert len(report.pallet_placements) == 5
    assert len(report.carton_placements) == 42


def test_scenario_rotation_disabled(carton, euro_pallet, container_40ft, rotation_off):
    report = generate_optimization_report(carton, euro_pallet, container_40ft, rotation_off)

    assert report.cartons_per_layer == 4
    assert report.cartons_per_pallet == 28
    assert report.pallets_needed == 8
    assert report.summary.pallets_used == 8
    assert report.summary.cartons_placed == 200
    assert report.summary.remaining_cartons == 0


def test_quantity_beyond_one_container(euro_pallet, container_40ft, rotation_on):
    carton = Carton(50, 30, 25, weight=15, quantity=10000)
    report = generate_optimization_report(carton, euro_pallet, container_40ft, rotation_on)

    assert report.pallets_needed == 239
    assert report.summary.pallets_used == 30
    assert report.summary.cartons_placed == 1260
    assert report.summary.remaining_cartons == 8740
    assert report.summary.containers_used == 8
    assert report.packing_efficiency == pytest.approx(0.126)
    assert len(report.pallet_placements) == 30


def test_weight_limited_stack_places_nothing(euro_pallet, container_40ft):
    carton = Carton(50, 30, 25, weight=300, quantity=50)
    tracer = RecordingTracer()
    report = generate_optimization_report(
        carton, euro_pallet, container_40ft, Settings(consider_load_bearing=True), tracer
    )

    assert report.pallet_layout is None
    assert report.container_layout.is_empty
    assert report.summary.cartons_placed == 0
    assert report.summary.remaining_cartons == 50
    assert report.summary.efficiency == 0
    assert report.summary.pallets_used == 0
    assert report.summary.containers_used == 0
    assert report.carton_placements == ()
    assert report.pallet_placements == ()
    assert "degenerate_fit" in tracer.kinds()


def test_zero_quantity_is_guarded(euro_pallet, container_40ft):
    carton = Carton(50, 30, 25, weight=15, quantity=0)
    report = generate_optimization_report(carton, euro_pallet, container_40ft)
    assert report.pallets_needed == 0
    assert report.packing_efficiency == 0
    assert report.summary.cartons_placed == 0
    assert report.summary.remaining_cartons == 0


def test_compose_without_layouts(carton, euro_pallet, container_40ft):
    report = compose(carton, euro_pallet, container_40ft, Settings(), None, ContainerLayout.empty())
    assert report.summary.remaining_cartons == carton.quantity
    assert report.space_utilization == 0
    assert report.layout_3d.pallet_layout is None
    assert report.layout_3d.scale == pytest.approx(0.01)


@pytest.mark.parametrize("quantity", [1, 27, 28, 29, 200, 1259, 1260, 1261, 10000])
@pytest.mark.parametrize("rotation", [True, False])
def test_quantity_is_conserved(quantity, rotation, euro_pallet, container_40ft):
    carton = Carton(50, 30, 25, weight=15, quantity=quantity)
    report = generate_optimization_report(
        carton, euro_pallet, container_40ft, Settings(enable_rotation=rotation)
    )
    summary = report.summary
    assert summary.cartons_placed + summary.remaining_cartons == quantity
    assert 0 <= report.packing_efficiency <= 1
    assert report.space_utilization >= 0
    assert report.weight_utilization <= 1


def test_reports_are_deterministic(carton, euro_pallet, container_40ft, rotation_on):
    first = generate_optimization_report(carton, euro_pallet, container_40ft, rotation_on)
    second = generate_optimization_report(carton, euro_pallet, container_40ft, rotation_on)
    assert first == second


def test_pallet_rotation_setting(carton, container_40ft):
    pallet = Pallet(120, 100, 14.5)
    fixed = generate_optimization_report(
        Carton(50, 30, 25, weight=15, quantity=5000), pallet, container_40ft, Settings()
    )
    rotating = generate_optimization_report(
        Carton(50, 30, 25, weight=15, quantity=5000),
        pallet,
        container_40ft,
        Settings(allow_pallet_rotation=True),
    )
    assert fixed.container_layout.orientation == "as_given"
    assert fixed.summary.pallets_used == 20
    assert rotating.container_layout.orientation == "swapped"
    assert rotating.summary.pallets_used == 24


def test_default_tracer_logs_decisions(carton, euro_pallet, container_40ft, caplog):
    with caplog.at_level(logging.DEBUG, logger="palletizr_core.tracing"):
        generate_optimization_report(carton, euro_pallet, container_40ft)
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("selected mixed_rows") for message in messages)
    assert any(message.startswith("container (as_given)") for message in messages)


def test_degenerate_container():
    carton = Carton(50, 30, 25, weight=15, quantity=100)
    pallet = Pallet(120, 80, 14.5, max_stack_height=300)
    low = Container(1219.2, 243.8, 200)
    report = generate_optimization_report(carton, pallet, low)

    # 11 layers -> 289.5 cm loaded pallet, taller than the container
    assert report.cartons_per_pallet > 0
    assert report.container_layout.total_pallets == 0
    assert report.summary.remaining_cartons == 100
    assert report.summary.containers_used == 0
