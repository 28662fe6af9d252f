"""Exception hierarchy for docx-easy.

All errors are caller-contract violations: they are raised before any
paragraph, table or layout object is handed back.
"""


class DocxEasyError(Exception):
    """Base exception for all docx-easy errors."""

    pass


class InvalidArgumentError(DocxEasyError, ValueError):
    """Raised when an argument has the right type but an unusable value.

    Examples are mismatched lengths between parallel style parameters, an
    unknown font-size name or a non-numeric length.
    """

    pass


class TypeMismatchError(DocxEasyError, TypeError):
    """Raised when an argument is of a type that cannot be interpreted at all."""

    pass


class LengthMismatchError(InvalidArgumentError):
    """Raised when a per-item parameter does not match the number of items."""

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"'{name}' must have length 1 or {expected}, got {actual}")
