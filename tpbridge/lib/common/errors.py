"""Validation failures raised while compiling a query.

Every failure shares the single ``InvalidRequest`` kind; subclasses only
narrow down which check rejected the input.
"""


class InvalidRequestError(ValueError):
    """Raised when caller-supplied query options fail validation."""

    code = "InvalidRequest"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyWhereClauseError(InvalidRequestError):
    """Raised when a where clause is empty or whitespace only."""

    def __init__(self):
        super().__init__("Empty where clause")


class InvalidConditionError(InvalidRequestError):
    """Raised when a clause matches none of the condition grammars."""

    def __init__(self, clause: str):
        super().__init__(f"Invalid condition format: {clause}")
        self.clause = clause


class InvalidIncludeError(InvalidRequestError):
    """Raised when a sanitized include entry fails the character check."""

    def __init__(self, entry: str):
        super().__init__(f"Invalid include parameter: {entry}")
        self.entry = entry


class InvalidPresetError(InvalidRequestError):
    """Raised for an unknown preset name or an unresolved preset variable."""

    def __init__(self, preset: str, message: str):
        super().__init__(message)
        self.preset = preset
