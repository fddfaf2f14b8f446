"""Assembly of one parenthesized group into an AST node."""

from typing import Sequence

from .classifier import ClassifiedToken, SubExpression, Symbol
from .errors import StructureError
from .nodes import FunctionCall, List, Node


def build(children: Sequence[ClassifiedToken]) -> Node:
    """Turn the classified children of one group into a node.

    A group headed by a bare symbol is a function call on the remaining
    children; a group headed by a nested group is a plain list of all of them.
    """
    if not children:
        raise StructureError("cannot parse expression")
    head = children[0]
    if isinstance(head, Symbol):
        return FunctionCall(head.text, _to_nodes(children[1:]))
    if isinstance(head, SubExpression):
        return List(_to_nodes(children))
    raise StructureError("cannot parse expression")


def _to_nodes(tokens: Sequence[ClassifiedToken]) -> tuple:
    return tuple(_to_node(t) for t in tokens)


def _to_node(token: ClassifiedToken) -> Node:
    if isinstance(token, Symbol):
        return FunctionCall(token.text)
    if isinstance(token, SubExpression):
        return token.node
    return token
