"""Exceptions raised while turning S-expression text into an AST."""


class SExprError(SyntaxError):
    pass


class EmptyInputError(SExprError):
    pass


class MalformedStructureError(SExprError):
    pass


class DepthExceeded(MalformedStructureError):
    pass


class StructureError(SExprError):
    pass
