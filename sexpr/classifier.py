"""Classification of atomic tokens into literals and symbols."""

import re
from dataclasses import dataclass
from typing import Union

from .nodes import Bool, Node, Number, StringLiteral

_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]+)?")


@dataclass(frozen=True)
class Symbol:
    text: str


@dataclass(frozen=True)
class SubExpression:
    node: Node


# Literal tokens are the leaf node classes themselves.
ClassifiedToken = Union[Number, StringLiteral, Bool, Symbol, SubExpression]


def classify(text: str) -> ClassifiedToken:
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return StringLiteral(text[1:-1])
    if _NUMBER.fullmatch(text):
        return Number(float(text))
    if text == "true":
        return Bool(True)
    if text == "false":
        return Bool(False)
    return Symbol(text)
