from .collection import VehicleCollection
from .commands import Update
from .console import ScriptedConsole, TerminalConsole
from .models import Coordinates, FuelType, Vehicle, VehicleFields, VehicleType
from .shell import Shell

__all__ = [
    "Coordinates",
    "FuelType",
    "ScriptedConsole",
    "Shell",
    "TerminalConsole",
    "Update",
    "Vehicle",
    "VehicleCollection",
    "VehicleFields",
    "VehicleType",
]
