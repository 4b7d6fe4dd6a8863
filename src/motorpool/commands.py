import abc
import io
import re
from typing import TYPE_CHECKING, Iterable
from rich.console import Console as RichConsole
from rich.table import Table
from structlog import get_logger
from .collection import VehicleCollection
from .console import Console
from .models import (
    FLOAT_MAX,
    X_MAX,
    X_MIN,
    Y_MAX,
    Y_MIN,
    Coordinates,
    FuelType,
    VehicleFields,
    VehicleType,
)
from .prompts import prompt_enum, prompt_float, prompt_int, prompt_text

if TYPE_CHECKING:  # pragma: no cover
    from .shell import Shell

log = get_logger()

KEY_RE = re.compile(r"-?[0-9]+")
KEY_BITS = 32

INVALID_KEY = "Error: invalid number. An integer is expected."
UNPARSABLE_KEY = "Error: cannot convert the value to a number."
NON_POSITIVE_KEY = "Error: key must be positive."

NAME_PROMPT = "Enter the vehicle name (non-empty string):"
X_PROMPT = f"Enter coordinate X ({X_MIN}..{X_MAX}):"
Y_PROMPT = f"Enter coordinate Y ({Y_MIN}..{Y_MAX}):"
POWER_PROMPT = "Enter the engine power (> 0):"
TYPE_PROMPT = (
    "Enter the vehicle type (BOAT, CHOPPER, HOVERBOARD, SPACESHIP)"
    " or an empty line for none:"
)
FUEL_PROMPT = (
    "Enter the fuel type (GASOLINE, KEROSENE, NUCLEAR, PLASMA)"
    " or an empty line for none:"
)


def resolve_key(console: Console, args: Iterable[str], missing_prompt: str) -> int | None:
    """
    Find the key for a keyed command.

    The first integer-shaped argument wins; without one the operator is asked
    until they type one.  Returns None, after writing a diagnostic, when the
    key does not fit a 32-bit int or is not positive.
    """
    candidate = None
    for arg in args:
        if KEY_RE.fullmatch(arg.strip()):
            candidate = arg.strip()
            break

    while candidate is None:
        line = console.read_line(missing_prompt).strip()
        if KEY_RE.fullmatch(line):
            candidate = line
        else:
            console.write(INVALID_KEY)

    key = int(candidate)
    limit = 2 ** (KEY_BITS - 1)
    if not -limit <= key < limit:
        console.write(UNPARSABLE_KEY)
        log.warning("key rejected", key=candidate, reason="unparsable")
        return None
    if key <= 0:
        console.write(NON_POSITIVE_KEY)
        log.warning("key rejected", key=key, reason="not positive")
        return None
    return key


def collect_fields(console: Console) -> VehicleFields:
    """
    Prompt for every vehicle field in order, each exactly once.
    """
    name = prompt_text(console, NAME_PROMPT)
    x = prompt_int(console, X_PROMPT, X_MIN, X_MAX)
    y = prompt_int(console, Y_PROMPT, Y_MIN, Y_MAX, bits=32)
    engine_power = prompt_float(console, POWER_PROMPT, 0.0, FLOAT_MAX)
    vehicle_type = prompt_enum(console, TYPE_PROMPT, VehicleType)
    fuel_type = prompt_enum(console, FUEL_PROMPT, FuelType)
    return VehicleFields(
        name=name,
        coordinates=Coordinates(x=x, y=y),
        engine_power=engine_power,
        type=vehicle_type.or_none(),
        fuel_type=fuel_type.or_none(),
    )


class Command(abc.ABC):
    name: str

    def __init__(self, collection: VehicleCollection, console: Console):
        self.collection = collection
        self.console = console

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"

    @abc.abstractmethod
    def execute(self, args: list[str]) -> None:
        """
        Run the command with the tokens that followed its name.
        """

    @property
    @abc.abstractmethod
    def description(self) -> str:
        """
        One entry in the help listing.
        """

    @property
    def stop_note(self) -> str:
        return f"\n(enter {self.console.stop_token} to abort the command)"


class Update(Command):
    name = "update"

    def execute(self, args: list[str]) -> None:
        key = resolve_key(
            self.console, args, "Error: a key is required for update. Enter the key:"
        )
        if key is None:
            return
        if not self.collection.contains(key):
            self.console.write(f"Error: element with key {key} not found.")
            log.warning("update aborted", key=key, reason="not found")
            return

        fields = collect_fields(self.console)
        vehicle = fields.build().with_id(key)
        self.collection.put(key, vehicle)
        self.console.write(f"Element with key {key} updated successfully.")
        log.info("vehicle updated", key=key, name=vehicle.name)

    @property
    def description(self) -> str:
        return (
            "update <key> - update the value of the collection element"
            " whose id equals the given key." + self.stop_note
        )


class Insert(Command):
    name = "insert"

    def execute(self, args: list[str]) -> None:
        key = resolve_key(
            self.console, args, "Error: a key is required for insert. Enter the key:"
        )
        if key is None:
            return
        if self.collection.contains(key):
            self.console.write(f"Error: element with key {key} already exists.")
            log.warning("insert aborted", key=key, reason="exists")
            return

        vehicle = collect_fields(self.console).build(key)
        self.collection.put(key, vehicle)
        self.console.write(f"Element with key {key} inserted successfully.")
        log.info("vehicle inserted", key=key, name=vehicle.name)

    @property
    def description(self) -> str:
        return "insert <key> - add a new element with the given key." + self.stop_note


class RemoveKey(Command):
    name = "remove_key"

    def execute(self, args: list[str]) -> None:
        key = resolve_key(
            self.console, args, "Error: a key is required for remove_key. Enter the key:"
        )
        if key is None:
            return
        if not self.collection.contains(key):
            self.console.write(f"Error: element with key {key} not found.")
            return
        self.collection.remove(key)
        self.console.write(f"Element with key {key} removed.")
        log.info("vehicle removed", key=key)

    @property
    def description(self) -> str:
        return "remove_key <key> - remove the element with the given key."


class Show(Command):
    name = "show"

    def execute(self, args: list[str]) -> None:
        if not len(self.collection):
            self.console.write("Collection is empty.")
            return
        table = Table()
        for column in ("Key", "Name", "X", "Y", "Engine power", "Type", "Fuel"):
            table.add_column(column)
        for key, vehicle in self.collection.items():
            table.add_row(
                str(key),
                vehicle.name,
                str(vehicle.coordinates.x),
                str(vehicle.coordinates.y),
                str(vehicle.engine_power),
                vehicle.type.name if vehicle.type else "-",
                vehicle.fuel_type.name if vehicle.fuel_type else "-",
            )
        buffer = io.StringIO()
        RichConsole(file=buffer, width=120, color_system=None).print(table)
        self.console.write(buffer.getvalue().rstrip("\n"))

    @property
    def description(self) -> str:
        return "show - print every element of the collection."


class Info(Command):
    name = "info"

    def execute(self, args: list[str]) -> None:
        self.console.write(f"Collection: {self.collection.name}")
        self.console.write(f"Initialized: {self.collection.init_date.isoformat()}")
        self.console.write(f"Elements: {len(self.collection)}")

    @property
    def description(self) -> str:
        return "info - print information about the collection."


class Help(Command):
    name = "help"

    def __init__(self, shell: "Shell"):
        super().__init__(shell.collection, shell.console)
        self.shell = shell

    def execute(self, args: list[str]) -> None:
        for command in self.shell.commands.values():
            self.console.write(command.description)

    @property
    def description(self) -> str:
        return "help - list the available commands."


class Exit(Command):
    name = "exit"

    def __init__(self, shell: "Shell"):
        super().__init__(shell.collection, shell.console)
        self.shell = shell

    def execute(self, args: list[str]) -> None:
        self.shell.running = False

    @property
    def description(self) -> str:
        return "exit - leave the shell."
