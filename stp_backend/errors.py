"""Domain-specific exceptions"""


class StpError(Exception):
    """Base exception for the STP engine"""


class InvalidInputError(StpError, ValueError):
    """A scenario input is missing, non-numeric, non-finite or out of range"""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
