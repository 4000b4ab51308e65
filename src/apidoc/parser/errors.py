"""Exceptions raised while scanning a comment block."""


class ScanError(Exception):
    """Base exception for scan failures.

    The message is prefixed with the source label and line number.
    """

    def __init__(self, message: str, file: str = "", line: int = 0):
        self.message = message
        self.file = file
        self.line = line
        super().__init__(f"{file}:{line}: {message}")


class MissingArgumentError(ScanError):
    """A tag was matched but its required content is empty or absent."""

    pass


class MalformedTagError(ScanError):
    """A header sub-tag is missing its name or its value."""

    pass
