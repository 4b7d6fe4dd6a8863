import datetime
from typing import Iterable
from structlog import get_logger
from .exceptions import ItemNotFound
from .models import Vehicle

log = get_logger()


class VehicleCollection:
    """
    In-memory mapping of integer keys to vehicles.
    """

    def __init__(self, name: str = "vehicles"):
        self.name = name
        self.init_date = datetime.datetime.now()
        self._items: dict[int, Vehicle] = {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name}, {len(self)})"

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def contains(self, key: int) -> bool:
        return key in self._items

    def get(self, key: int) -> Vehicle:
        try:
            return self._items[key]
        except KeyError:
            raise ItemNotFound(f"{key} not found in {self.name}")

    def put(self, key: int, vehicle: Vehicle) -> None:
        """
        Store a vehicle at key, replacing any vehicle already there.

        The stored vehicle's id must equal its key.
        """
        if vehicle.id != key:
            raise ValueError(f"vehicle id {vehicle.id} does not match key {key}")
        self._items[key] = vehicle
        log.debug("put", collection=self.name, key=key)

    def remove(self, key: int) -> Vehicle:
        try:
            return self._items.pop(key)
        except KeyError:
            raise ItemNotFound(f"{key} not found in {self.name}")

    def keys(self) -> set[int]:
        return set(self._items)

    def items(self) -> Iterable[tuple[int, Vehicle]]:
        yield from sorted(self._items.items())

    def reset(self) -> None:
        self._items = {}
