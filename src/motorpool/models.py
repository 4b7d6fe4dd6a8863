"""
Vehicle record models.

A vehicle is built in two phases: ``VehicleFields`` carries the validated
value fields, ``VehicleFields.build`` attaches an id.  Replacing a stored
vehicle re-keys the fresh record with ``Vehicle.with_id``.
"""
import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator

# largest finite single-precision float
FLOAT_MAX = 3.4028234663852886e38

X_MIN, X_MAX = 0, 225
Y_MIN, Y_MAX = 0, 493
PLACEHOLDER_ID = 0


class VehicleType(Enum):
    BOAT = "BOAT"
    CHOPPER = "CHOPPER"
    HOVERBOARD = "HOVERBOARD"
    SPACESHIP = "SPACESHIP"


class FuelType(Enum):
    GASOLINE = "GASOLINE"
    KEROSENE = "KEROSENE"
    NUCLEAR = "NUCLEAR"
    PLASMA = "PLASMA"


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int = Field(..., ge=X_MIN, le=X_MAX)
    y: int = Field(..., ge=Y_MIN, le=Y_MAX)


class VehicleFields(BaseModel):
    name: str
    coordinates: Coordinates
    engine_power: float = Field(..., gt=0, le=FLOAT_MAX)
    type: VehicleType | None = None
    fuel_type: FuelType | None = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    def build(self, id: int = PLACEHOLDER_ID) -> "Vehicle":
        return Vehicle(id=id, **dict(self))


class Vehicle(VehicleFields):
    id: int = Field(..., ge=PLACEHOLDER_ID)
    creation_date: datetime.datetime = Field(default_factory=datetime.datetime.now)

    def __str__(self) -> str:
        return f"Vehicle({self.id}, {self.name})"

    def with_id(self, id: int) -> "Vehicle":
        """
        Return a copy of this vehicle carrying the given id.
        """
        return self.model_copy(update={"id": id})
