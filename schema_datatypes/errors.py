"""Exceptions raised by the data type model and its loader."""


class DataTypeError(ValueError):
    """Base exception for data type construction failures.

    Model queries never raise; only construction preconditions do, and
    they fail immediately rather than on a later query.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        """Initialize the error.

        Args:
            message: Human-readable error description
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.cause = cause


class TypeGraphError(DataTypeError):
    """Raised when a type graph document is malformed.

    Raised when:
    - The document has no "types" mapping
    - A type definition is not a mapping or has an unknown "type"
    - A reference is not a string
    """

    pass


class CircularReferenceError(TypeGraphError):
    """Raised when type definitions reference each other in a cycle."""

    def __init__(self, chain: list[str]):
        super().__init__(f"Circular type reference: {' -> '.join(chain)}")
        self.chain = chain
