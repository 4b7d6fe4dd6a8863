"""
Retry-until-valid prompts for scalar fields.

Each ``parse_*`` function turns one raw line into a ``Parsed`` result.  The
``prompt_*`` functions keep asking until a parse succeeds, writing the parse
error to the console after every failed attempt.  Bad input never raises;
only console-level aborts (the stop token, end of input) escape.
"""
import math
import re
import struct
from enum import Enum
from typing import Callable, Generic, Type, TypeVar, Union
from pydantic import BaseModel, ConfigDict
from .console import Console

T = TypeVar("T")
E = TypeVar("E", bound=Enum)
M = TypeVar("M")

INTEGER_RE = re.compile(r"[+-]?[0-9]+")
# decimal and hex floats, each with an optional f/d type suffix
DECIMAL_FLOAT_RE = re.compile(
    r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?[fFdD]?"
)
HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+[fFdD]?"
)

EMPTY_STRING = "Error: the string must not be empty."
NOT_AN_INTEGER = "Error: enter an integer."
NOT_A_FLOAT = "Error: enter a floating point number."
NOT_A_MEMBER = "Error: enter one of the listed values."


class Parsed(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Present(BaseModel, Generic[M]):
    model_config = ConfigDict(frozen=True)

    member: M

    def or_none(self) -> M:
        return self.member


class Absent(BaseModel):
    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return "ABSENT"

    def or_none(self) -> None:
        return None


ABSENT = Absent()
Choice = Union[Present, Absent]


def to_single(value: float) -> float | None:
    """
    Round a double to single precision; None if it overflows.
    """
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return None


def parse_text(line: str | None) -> Parsed[str]:
    if line is None or not line.strip():
        return Parsed(error=EMPTY_STRING)
    return Parsed(value=line)


def parse_int(line: str, min: int, max: int, bits: int = 64) -> Parsed[int]:
    """
    Parse a signed integer of the given bit width within inclusive [min, max].
    """
    if not INTEGER_RE.fullmatch(line):
        return Parsed(error=NOT_AN_INTEGER)
    value = int(line)
    limit = 2 ** (bits - 1)
    if not -limit <= value < limit:
        return Parsed(error=NOT_AN_INTEGER)
    if value < min or value > max:
        return Parsed(error=f"Error: the value must be in the range [{min}, {max}].")
    return Parsed(value=value)


def parse_float(line: str, min: float, max: float) -> Parsed[float]:
    """
    Parse a float within (min, max], rounded to single precision.

    Decimal and hex notation are accepted, each with an optional f/d suffix.
    The lower bound is exclusive, unlike the integer bounds.
    """
    stripped = line.strip()
    if DECIMAL_FLOAT_RE.fullmatch(stripped):
        value = float(stripped.rstrip("fFdD"))
    elif HEX_FLOAT_RE.fullmatch(stripped):
        try:
            value = float.fromhex(stripped.rstrip("fFdD"))
        except OverflowError:
            value = math.inf
    else:
        return Parsed(error=NOT_A_FLOAT)

    single = to_single(value)
    if single is None or math.isnan(single) or single <= min or single > max:
        return Parsed(
            error=f"Error: the value must be greater than {min} and not exceed {max}."
        )
    return Parsed(value=single)


def parse_enum(line: str | None, enum_cls: Type[E]) -> Parsed[Choice]:
    if line is None or not line.strip():
        return Parsed(value=ABSENT)
    try:
        return Parsed(value=Present(member=enum_cls[line.strip().upper()]))
    except KeyError:
        names = " ".join(member.name for member in enum_cls)
        return Parsed(error=f"Available values: {names}\n{NOT_A_MEMBER}")


def prompt_until_valid(
    console: Console, prompt: str, parse: Callable[[str], Parsed[T]]
) -> T:
    while True:
        result = parse(console.read_line(prompt))
        if result.ok:
            return result.value  # type: ignore[return-value]
        console.write(result.error)  # type: ignore[arg-type]


def prompt_text(console: Console, prompt: str) -> str:
    return prompt_until_valid(console, prompt, parse_text)


def prompt_int(
    console: Console, prompt: str, min: int, max: int, *, bits: int = 64
) -> int:
    return prompt_until_valid(
        console, prompt, lambda line: parse_int(line, min, max, bits)
    )


def prompt_float(console: Console, prompt: str, min: float, max: float) -> float:
    return prompt_until_valid(console, prompt, lambda line: parse_float(line, min, max))


def prompt_enum(console: Console, prompt: str, enum_cls: Type[E]) -> Choice:
    """
    Prompt for a member of enum_cls by name, case-insensitively.

    An empty answer returns ABSENT straight away; anything else that isn't a
    member name lists the valid names and asks again.
    """
    return prompt_until_valid(console, prompt, lambda line: parse_enum(line, enum_cls))
