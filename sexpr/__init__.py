from .parser import parse, MAX_DEPTH
from .nodes import Number, StringLiteral, Bool, FunctionCall, List, Node, render
from .classifier import classify, Symbol, SubExpression
from .builder import build
from .errors import (
    SExprError, EmptyInputError, MalformedStructureError, StructureError, DepthExceeded,
)

__all__ = [
    "parse", "render", "classify", "build", "MAX_DEPTH",
    "Number", "StringLiteral", "Bool", "FunctionCall", "List", "Node",
    "Symbol", "SubExpression",
    "SExprError", "EmptyInputError", "MalformedStructureError", "StructureError", "DepthExceeded",
]
