"""
Error types raised by the data loader
"""


class LoadError(Exception):
    """The CSV resource could not be fetched or parsed at all."""

    def __init__(self, source, message: str):
        self.source = str(source)
        super().__init__(f"{message} ({self.source})")


class RowParseWarning(UserWarning):
    """A single malformed row skipped while parsing."""

    def __init__(self, fields: list):
        self.fields = list(fields)
        super().__init__(f"Skipped malformed row with {len(self.fields)} fields")
