"""Single-pass, stack-based parser from S-expression text to a typed AST."""

import logging
from typing import Any

from .builder import build
from .classifier import SubExpression, classify
from .errors import DepthExceeded, EmptyInputError, MalformedStructureError
from .nodes import List, Node

logger = logging.getLogger(__name__)

MAX_DEPTH = 256

# Tab and carriage return end a token the same way a space does.
_TERMINATORS = frozenset(" \t\r\n)")

# Marks where a parenthesized group begins on the expression stack.
GROUP_START = object()


def parse(src: str, *, max_depth: int = MAX_DEPTH) -> Node:
    """Parse S-expression text into an AST node.

    Inside a string, a backslash that is not itself escaped turns a following
    quote into literal content. Backslashes are otherwise kept verbatim.
    """
    buf: list[str] = []
    stack: list[Any] = []
    in_str = False
    escaped = False
    depth = 0

    def flush() -> None:
        text = "".join(buf)
        buf.clear()
        if text:
            token = classify(text)
            logger.debug("token %r -> %r", text, token)
            stack.append(token)

    def close_group() -> None:
        children = []
        while stack:
            item = stack.pop()
            if item is GROUP_START:
                break
            children.append(item)
        else:
            raise MalformedStructureError("unexpected ')'")
        children.reverse()
        node = build(children) if children else List()
        logger.debug("group -> %r", node)
        stack.append(SubExpression(node))

    for ch in src:
        if ch == '"':
            if in_str and escaped:
                buf[-1] = ch
                escaped = False
            else:
                buf.append(ch)
                in_str = not in_str
        elif in_str:
            buf.append(ch)
            escaped = ch == "\\" and not escaped
        elif ch == "(":
            flush()
            depth += 1
            if depth > max_depth:
                raise DepthExceeded("max nesting depth exceeded")
            stack.append(GROUP_START)
        elif ch in _TERMINATORS:
            flush()
            if ch == ")":
                close_group()
                depth -= 1
        else:
            buf.append(ch)
    flush()

    if not stack:
        raise EmptyInputError("input is empty")
    if len(stack) > 1:
        raise MalformedStructureError("unexpected expression")
    result = stack.pop()
    if not isinstance(result, SubExpression):
        raise MalformedStructureError("unexpected expression")
    return result.node
