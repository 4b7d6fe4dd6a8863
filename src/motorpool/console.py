import abc
from typing import Iterable
import typer
from .config import DEFAULT_STOP_TOKEN
from .exceptions import CommandAborted, ScriptExhausted


class Console(abc.ABC):
    """
    Line input and text output for commands.

    Reading the stop token aborts whatever command is running.
    """

    def __init__(self, stop_token: str = DEFAULT_STOP_TOKEN):
        self.stop_token = stop_token

    def read_line(self, prompt: str) -> str:
        line = self._read(prompt)
        if line.strip() == self.stop_token:
            raise CommandAborted(prompt)
        return line

    @abc.abstractmethod
    def _read(self, prompt: str) -> str:
        """
        Block until one raw line is available and return it untrimmed.
        """

    @abc.abstractmethod
    def write(self, text: str) -> None:
        """
        Write one line of text.
        """


class TerminalConsole(Console):
    def _read(self, prompt: str) -> str:
        # end of input raises typer.Abort
        return typer.prompt(prompt, default="", show_default=False, prompt_suffix=" ")

    def write(self, text: str) -> None:
        typer.echo(text)


class ScriptedConsole(Console):
    """
    Console fed from a fixed list of lines, recording everything written.
    """

    def __init__(self, lines: Iterable[str], stop_token: str = DEFAULT_STOP_TOKEN):
        super().__init__(stop_token)
        self._lines = iter(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def __repr__(self) -> str:
        return f"ScriptedConsole(prompts={len(self.prompts)}, output={len(self.output)})"

    def _read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise ScriptExhausted(f"no input left for prompt {prompt!r}")

    def write(self, text: str) -> None:
        self.output.extend(text.splitlines() or [""])

    @property
    def text(self) -> str:
        return "\n".join(self.output)
