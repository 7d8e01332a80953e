class ProbeError(Exception):
    """The surface could not say whether it can display a character."""


class RenderError(Exception):
    """The surface rejected text while drawing it."""

    def __init__(self, message: str, char: str | None = None):
        super().__init__(message)
        self.char = char
