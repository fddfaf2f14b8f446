import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

# AST node types: Number, StringLiteral, Bool, FunctionCall, List.
# A bare symbol becomes a zero-argument FunctionCall; there is no Symbol node.


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class StringLiteral:
    value: str

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class Bool:
    value: bool

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class FunctionCall:
    name: str
    args: tuple = ()

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class List:
    elements: tuple = ()

    def __str__(self) -> str:
        return render(self)


Node = Union[Number, StringLiteral, Bool, FunctionCall, List]


def format_number(value: float) -> str:
    """Shortest positional decimal text for value, without a trailing ``.0``."""
    if math.isinf(value):
        # Digit runs too long for a float parse back to inf.
        return "1" + "0" * 309
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def render(node: Node) -> str:
    """Render a node in its canonical text form.

    Strings are embedded raw between double quotes, so a value holding a
    quote character does not survive a second parse.
    """
    if isinstance(node, Bool):
        return "true" if node.value else "false"
    if isinstance(node, Number):
        return format_number(node.value)
    if isinstance(node, StringLiteral):
        return f'"{node.value}"'
    if isinstance(node, FunctionCall):
        return "(" + node.name + "".join(" " + render(a) for a in node.args) + ")"
    if isinstance(node, List):
        return "(" + " ".join(render(e) for e in node.elements) + ")"
    raise TypeError(f"not an AST node: {node!r}")
