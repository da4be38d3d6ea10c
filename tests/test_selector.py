import pytest

from palletizr_core.models import Carton, LayerLayout, Pallet, ScoringWeights, Settings
from palletizr_core.selector import (
    Candidate,
    best_candidate,
    evaluate_candidates,
    score_layout,
    select_pallet_layout,
)
from palletizr_core.tracing import RecordingTracer


def test_candidates_in_evaluation_order(carton, euro_pallet, rotation_on):
    candidates = evaluate_candidates(carton, euro_pallet, rotation_on)

    assert [c.name for c in candidates] == ["as_given", "swapped", "mixed_rows"]
    scores = [c.score for c in candidates]
    assert scores == [
        pytest.approx(28 + 62.5 + 100),
        pytest.approx(28 + 62.5 + 100 + 50),
        pytest.approx(42 + 93.75 + 150 + 75),
    ]


def test_rotation_enabled_selects_mixed_rows(carton, euro_pallet, rotation_on):
    layout = select_pallet_layout(carton, euro_pallet, rotation_on)
    assert layout.kind == "mixed"
    assert layout.total_cartons == 42


def test_rotation_disabled_selects_as_given(carton, euro_pallet, rotation_off):
    candidates = evaluate_candidates(carton, euro_pallet, rotation_off)
    assert [c.name for c in candidates] == ["as_given"]

    layout = select_pallet_layout(carton, euro_pallet, rotation_off)
    assert layout.rotation == "LWH"
    assert layout.cartons_per_layer == 4
    assert layout.total_cartons == 28


def test_ties_keep_first_candidate(carton, euro_pallet, rotation_on):
    candidates = evaluate_candidates(carton, euro_pallet, rotation_on)
    tied = [Candidate(c.name, c.layout, 100.0) for c in candidates]
    assert best_candidate(tied).name == "as_given"


def test_empty_candidates_are_skipped(carton, euro_pallet, rotation_on):
    candidates = evaluate_candidates(carton, euro_pallet, rotation_on)
    nothing = LayerLayout(
        kind="orientation",
        cartons_per_layer=0,
        max_layers=0,
        total_cartons=0,
        placements=(),
        efficiency=0.0,
        utilization=0.0,
    )
    empty = Candidate("as_given", nothing, 1000.0)
    assert best_candidate([empty]) is None
    assert best_candidate([empty, candidates[1]]).name == "swapped"


def test_nothing_fits_returns_none():
    carton = Carton(130, 90, 25, weight=10, quantity=5)
    pallet = Pallet(120, 80, 14.5)
    tracer = RecordingTracer()

    assert select_pallet_layout(carton, pallet, Settings(), tracer) is None
    assert "candidate_selected" not in tracer.kinds()
    assert tracer.events[-1].data["stage"] == "pallet"


def test_scoring_weights_are_configurable(carton, euro_pallet):
    weights = ScoringWeights(rotated_bonus=0.0, mixed_row_bonus=0.0)
    candidates = evaluate_candidates(carton, euro_pallet, Settings(scoring=weights))
    assert candidates[0].score == pytest.approx(candidates[1].score)
    assert score_layout(candidates[2].layout, weights) == pytest.approx(42 + 93.75 + 150)


@pytest.mark.parametrize(
    "length,width",
    [(50, 30), (40, 30), (45, 35), (60, 25), (33, 21), (120, 80), (100, 70), (80, 60)],
)
def test_rotation_never_reduces_cartons_per_layer(length, width, euro_pallet):
    carton = Carton(length, width, 20, weight=5, quantity=100)
    for pallet in (euro_pallet, Pallet(120, 100, 14.5), Pallet(120, 90, 14.5)):
        with_rotation = select_pallet_layout(carton, pallet, Settings(enable_rotation=True))
        without = select_pallet_layout(carton, pallet, Settings(enable_rotation=False))
        per_layer_on = with_rotation.cartons_per_layer if with_rotation else 0
        per_layer_off = without.cartons_per_layer if without else 0
        assert per_layer_on >= per_layer_off


def test_tracer_sees_every_candidate(carton, euro_pallet, rotation_on):
    tracer = RecordingTracer()
    select_pallet_layout(carton, euro_pallet, rotation_on, tracer)
    assert tracer.kinds() == [
        "candidate_scored",
        "candidate_scored",
        "candidate_scored",
        "candidate_selected",
    ]
    assert tracer.events[-1].data["name"] == "mixed_rows"
