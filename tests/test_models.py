import pytest
from pydantic import ValidationError
from motorpool.models import (
    FLOAT_MAX,
    Coordinates,
    FuelType,
    Vehicle,
    VehicleFields,
    VehicleType,
)


def _fields(**overrides) -> VehicleFields:
    data = dict(
        name="Truck",
        coordinates=Coordinates(x=10, y=20),
        engine_power=3.5,
        type=VehicleType.BOAT,
    )
    data.update(overrides)
    return VehicleFields(**data)


def test_build_uses_placeholder_id():
    vehicle = _fields().build()
    assert isinstance(vehicle, Vehicle)
    assert vehicle.id == 0
    assert vehicle.name == "Truck"
    assert vehicle.fuel_type is None


def test_build_with_id():
    assert _fields().build(7).id == 7


def test_with_id_copies():
    vehicle = _fields().build()
    rekeyed = vehicle.with_id(5)
    assert rekeyed.id == 5
    assert vehicle.id == 0
    assert rekeyed.name == vehicle.name
    assert rekeyed.creation_date == vehicle.creation_date


def test_str():
    assert str(_fields().build(3)) == "Vehicle(3, Truck)"


@pytest.mark.parametrize("x,y", [(0, 0), (225, 493)])
def test_coordinates_bounds_inclusive(x, y):
    assert Coordinates(x=x, y=y).x == x


@pytest.mark.parametrize("x,y", [(-1, 0), (226, 0), (0, -1), (0, 494)])
def test_coordinates_out_of_range(x, y):
    with pytest.raises(ValidationError):
        Coordinates(x=x, y=y)


def test_coordinates_frozen():
    coordinates = Coordinates(x=1, y=2)
    with pytest.raises(ValidationError):
        coordinates.x = 3  # type: ignore[misc]


@pytest.mark.parametrize("power", [0, -1.0, FLOAT_MAX * 2])
def test_engine_power_out_of_range(power):
    with pytest.raises(ValidationError):
        _fields(engine_power=power)


def test_engine_power_max_allowed():
    assert _fields(engine_power=FLOAT_MAX).engine_power == FLOAT_MAX


@pytest.mark.parametrize("name", ["", "   "])
def test_blank_name(name):
    with pytest.raises(ValidationError):
        _fields(name=name)


def test_name_kept_verbatim():
    assert _fields(name=" Truck ").name == " Truck "


def test_negative_id_rejected():
    with pytest.raises(ValidationError):
        _fields().build(-1)


def test_enum_members():
    assert [m.name for m in VehicleType] == [
        "BOAT",
        "CHOPPER",
        "HOVERBOARD",
        "SPACESHIP",
    ]
    assert [m.name for m in FuelType] == ["GASOLINE", "KEROSENE", "NUCLEAR", "PLASMA"]
