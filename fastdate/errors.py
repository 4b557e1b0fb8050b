"""The error raised when a date, time or datetime cannot be parsed."""


class Error(ValueError):
    """A parse or conversion failure carrying a plain message.

    ``str(error)`` is the message itself; an error built without a message
    renders as the empty string.
    """

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message