import pytest
from motorpool.collection import VehicleCollection
from motorpool.console import ScriptedConsole
from motorpool.exceptions import UnknownCommand
from motorpool.shell import Shell
from testdata import BUS_FIELDS, STOP, TRUCK_FIELDS, collection_with


def _shell(lines: list[str], collection: VehicleCollection | None = None) -> Shell:
    if collection is None:
        collection = VehicleCollection("test")
    return Shell(collection, ScriptedConsole(lines))


def test_shell_repr():
    assert repr(_shell([])) == "Shell(VehicleCollection(test, 0))"


def test_registered_commands():
    assert list(_shell([]).commands) == [
        "help",
        "info",
        "show",
        "insert",
        "update",
        "remove_key",
        "exit",
    ]


def test_dispatch_blank_line():
    shell = _shell([])
    shell.dispatch("   ")
    assert shell.console.output == []


def test_dispatch_unknown():
    with pytest.raises(UnknownCommand):
        _shell([]).dispatch("launch 5")


def test_dispatch_update_with_args():
    shell = _shell(TRUCK_FIELDS, collection_with(5))
    shell.dispatch("update 5")
    assert shell.collection.get(5).name == "Truck"


def test_dispatch_reports_abort():
    shell = _shell(["Truck", STOP], collection_with(5))
    shell.dispatch("update 5")
    assert shell.console.output == ["Command aborted."]
    assert shell.collection.get(5).name == "Old"


def test_insert_then_update():
    lines = ["insert 2"] + BUS_FIELDS + ["update 2"] + TRUCK_FIELDS + ["exit"]
    shell = _shell(lines)
    shell.run()
    assert not shell.running
    assert shell.collection.keys() == {2}
    assert shell.collection.get(2).name == "Truck"
    assert shell.console.output == [
        "Element with key 2 inserted successfully.",
        "Element with key 2 updated successfully.",
    ]


def test_insert_existing_key():
    shell = _shell(["insert 5", "exit"], collection_with(5))
    shell.run()
    assert shell.console.output == ["Error: element with key 5 already exists."]


def test_remove_key():
    shell = _shell(["remove_key 5", "remove_key 5", "exit"], collection_with(5))
    shell.run()
    assert len(shell.collection) == 0
    assert shell.console.output == [
        "Element with key 5 removed.",
        "Error: element with key 5 not found.",
    ]


def test_run_unknown_command_continues():
    shell = _shell(["fly", "exit"])
    shell.run()
    assert shell.console.output == [
        "Unknown command 'fly'. Type 'help' for the list of commands."
    ]


def test_run_stop_token_at_prompt():
    shell = _shell([STOP, "info"])
    shell.run()
    assert shell.console.output[-1] == "Elements: 0"


def test_run_ends_when_script_exhausted():
    shell = _shell(["update 5"], collection_with(5))
    shell.run()
    assert not shell.running
    assert shell.collection.get(5).name == "Old"


def test_help_lists_descriptions():
    shell = _shell(["help"])
    shell.run()
    assert shell.console.output[0] == "help - list the available commands."
    assert any(line.startswith("update <key>") for line in shell.console.output)
    assert f"(enter {STOP} to abort the command)" in shell.console.output


def test_info():
    shell = _shell(["info"], collection_with(1, 2))
    shell.run()
    assert shell.console.output[0] == "Collection: test"
    assert shell.console.output[1].startswith("Initialized: ")
    assert shell.console.output[2] == "Elements: 2"


def test_show_empty():
    shell = _shell(["show"])
    shell.run()
    assert shell.console.output == ["Collection is empty."]


def test_show_lists_vehicles():
    shell = _shell(["update 5"] + TRUCK_FIELDS + ["show"], collection_with(5, 8))
    shell.run()
    table = shell.console.text
    assert "Truck" in table
    assert "BOAT" in table
    assert "KEROSENE" in table
    assert table.index("Truck") < table.index("Old")
