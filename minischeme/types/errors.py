from __future__ import annotations

from minischeme import LispValue
from minischeme.printer import show, show_many


class SchemeError(Exception):
    """ Base class for all minischeme errors"""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args

    __hash__ = Exception.__hash__


class SchemeArityError(SchemeError):
    """ Raised when a primitive or form receives the wrong number of arguments"""

    def __init__(self, expected: int, found: list[LispValue]):
        super().__init__(expected, list(found))
        self.expected = expected
        self.found = list(found)

    def __str__(self) -> str:
        return f"Expected {self.expected} args; found values {show_many(self.found)}"


class SchemeTypeError(SchemeError):
    """ Raised when an argument has the wrong variant"""

    def __init__(self, expected: str, found: LispValue):
        super().__init__(expected, found)
        self.expected = expected
        self.found = found

    def __str__(self) -> str:
        return f"Invalid type: expected {self.expected}, found {show(self.found)}"


class SchemeSyntaxError(SchemeError):
    """ Raised when source text cannot be read"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Parse error at {self.message}"


class SchemeBadFormError(SchemeError):
    """ Raised when a value has no special-form or application shape"""

    def __init__(self, message: str, form: LispValue):
        super().__init__(message, form)
        self.message = message
        self.form = form

    def __str__(self) -> str:
        return f"{self.message}: {show(self.form)}"


class SchemeNotFunctionError(SchemeError):
    """ Raised when an application names no known primitive"""

    def __init__(self, message: str, name: str):
        super().__init__(message, name)
        self.message = message
        self.name = name

    def __str__(self) -> str:
        return f"{self.message}: {show(self.name)}"


class SchemeUnboundSymbol(SchemeError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, message: str, name: str):
        super().__init__(message, name)
        self.message = message
        self.name = name

    def __str__(self) -> str:
        return f"{self.message}: {self.name}"


class SchemeRuntimeError(SchemeError):
    """ Raised for failures that carry only a message"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
