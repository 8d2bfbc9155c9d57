# src/lexnet/core/fields.py
"""
Sequential field reader shared by the index and data line parsers.
"""

from lexnet.core.errors import MalformedLine


class FieldReader:
    """Consumes whitespace-separated fields strictly left to right."""

    def __init__(self, text: str, error: type[MalformedLine], line: str | None = None):
        self.tokens = text.split()
        self.cursor = 0
        self.error = error
        self.line = line if line is not None else text

    @property
    def remaining(self) -> int:
        return len(self.tokens) - self.cursor

    def fail(self, message: str) -> MalformedLine:
        return self.error(message, self.line)

    def next(self, field: str) -> str:
        if self.cursor >= len(self.tokens):
            raise self.fail(f"line ended before field '{field}'")
        token = self.tokens[self.cursor]
        self.cursor += 1
        return token

    def next_int(self, field: str, base: int = 10) -> int:
        token = self.next(field)
        try:
            return int(token, base)
        except ValueError:
            raise self.fail(f"field '{field}' is not a base-{base} integer: {token!r}") from None

    def finish(self) -> None:
        if self.remaining:
            extra = " ".join(self.tokens[self.cursor:])
            raise self.fail(f"{self.remaining} unexpected trailing field(s): {extra!r}")
