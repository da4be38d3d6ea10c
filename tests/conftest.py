import pytest

from palletizr_core.models import Carton, Container, Pallet, Settings


@pytest.fixture
def carton():
    return Carton(length=50, width=30, height=25, weight=15, quantity=200)


@pytest.fixture
def euro_pallet():
    return Pallet(length=120, width=80, height=14.5, max_stack_height=200, max_stack_weight=1000)


@pytest.fixture
def container_40ft():
    return Container(length=1219.2, width=243.8, height=259.1, weight_capacity=26000)


@pytest.fixture
def rotation_on():
    return Settings(enable_rotation=True, consider_load_bearing=False)


@pytest.fixture
def rotation_off():
    return Settings(enable_rotation=False, consider_load_bearing=False)
