"""
Error types raised while loading and compiling form definitions.

All errors are synchronous and non-retryable. A failed compile never
yields a usable form.
"""


class FormDefinitionError(Exception):
    """Base class for all form definition failures."""
    pass


class ParseError(FormDefinitionError):
    """
    Raised when a form definition is not well-formed.

    Properties:
        lineno: Line reported by the JSON decoder (None for shape errors)
        colno: Column reported by the JSON decoder (None for shape errors)
    """

    def __init__(self, message: str, lineno=None, colno=None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class CompileError(FormDefinitionError):
    """Raised for semantic errors: bad directives, unknown types, unbound variables."""
    pass
