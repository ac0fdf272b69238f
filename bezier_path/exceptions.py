"""
Curve path exceptions

Errors raised by CurvePath and the editing session when a caller breaks the
index or topology contract. Validation always happens before any point is
touched, so a raised error leaves the path unchanged.
"""


class CurvePathError(Exception):
    """Base exception class for all curve path errors"""

    def __init__(self, message: str, error_code: str = "CP_GENERAL"):
        super().__init__(message)
        self.error_code = error_code
        self.message = message

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class IndexOutOfRangeError(CurvePathError, IndexError):
    """Raised when a point or segment index falls outside the path"""

    def __init__(self, index: int, valid_range: tuple, kind: str = "point"):
        self.index = index
        self.valid_range = valid_range
        self.kind = kind

        low, high = valid_range
        full_message = f"{kind.title()} index {index} out of range [{low}, {high})"

        super().__init__(full_message, "CP_INDEX")


class InvalidStateError(CurvePathError, RuntimeError):
    """Raised when an operation is not allowed for the path's current topology"""

    def __init__(self, message: str, operation: str = None):
        self.operation = operation

        if operation:
            full_message = f"Cannot {operation}: {message}"
        else:
            full_message = f"Invalid path state: {message}"

        super().__init__(full_message, "CP_STATE")
