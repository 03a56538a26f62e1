"""
Exceptions raised while fetching and normalizing radio data.
"""


class RadioError(Exception):
    """Base exception for seabird radio errors."""

    pass


class ParseError(RadioError, ValueError):
    """Malformed numeric, timestamp or enumerated text."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class ValidationError(RadioError):
    """Well-formed data that is incomplete or duplicated."""

    pass


class UpstreamError(RadioError):
    """Transport failure or malformed response from an upstream source."""

    pass


class UserInputError(RadioError):
    """Bad command arguments supplied by a chat user.

    ``reply`` holds the fixed text sent back to the user.
    """

    def __init__(self, reply: str) -> None:
        super().__init__(reply)
        self.reply = reply
