class SlipError(Exception):
    """Base error for payment slip data and encoding."""


class DisabledFieldError(SlipError):
    """Raised when a field is read or written while its slip variant disables it."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is disabled")
