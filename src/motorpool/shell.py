from structlog import get_logger
from .collection import VehicleCollection
from .commands import Command, Exit, Help, Info, Insert, RemoveKey, Show, Update
from .console import Console
from .exceptions import CommandAborted, ScriptExhausted, UnknownCommand

log = get_logger()

PROMPT = ">"


class Shell:
    """
    Read command lines from a console and dispatch them by name.
    """

    def __init__(self, collection: VehicleCollection, console: Console):
        self.collection = collection
        self.console = console
        self.running = False
        self.commands: dict[str, Command] = {}
        for command in (
            Help(self),
            Info(collection, console),
            Show(collection, console),
            Insert(collection, console),
            Update(collection, console),
            RemoveKey(collection, console),
            Exit(self),
        ):
            self.register(command)

    def __repr__(self) -> str:
        return f"Shell({self.collection!r})"

    def register(self, command: Command) -> None:
        self.commands[command.name] = command

    def dispatch(self, line: str) -> None:
        """
        Run one command line.

        An aborted command is reported and swallowed; an unknown command name
        raises UnknownCommand.
        """
        tokens = line.split()
        if not tokens:
            return
        name, args = tokens[0], tokens[1:]
        try:
            command = self.commands[name]
        except KeyError:
            raise UnknownCommand(name)

        log.debug("dispatch", command=name, args=args)
        try:
            command.execute(args)
        except CommandAborted:
            self.console.write("Command aborted.")
            log.info("command aborted", command=name)

    def run(self) -> None:
        self.running = True
        while self.running:
            try:
                self.dispatch(self.console.read_line(PROMPT))
            except UnknownCommand as e:
                self.console.write(
                    f"Unknown command '{e}'. Type 'help' for the list of commands."
                )
            except CommandAborted:
                # stop token at the command prompt itself
                continue
            except ScriptExhausted:
                log.info("script exhausted")
                break
        self.running = False
