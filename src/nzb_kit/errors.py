# src/nzb_kit/errors.py


class NzbError(Exception):
    """Base class for all errors raised while parsing an NZB document."""


class MalformedDocument(NzbError, ValueError):
    """
    Input is not a usable NZB document.

    Raised when the markup is not well-formed, the root element is not <nzb>,
    a numeric attribute is not an integer, or (strict mode only) the bytes
    cannot be decoded with the declared encoding.

    Position fields are filled in when the tokenizer reports them:
    - line / column: 1-based location in the decoded text
    - offset: byte offset in the raw input
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: int | None = None,
        offset: int | None = None,
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.offset = offset
        super().__init__(self._format())

    def _format(self) -> str:
        position = []
        if self.line is not None:
            position.append(f"line {self.line}")
        if self.column is not None:
            position.append(f"column {self.column}")
        if self.offset is not None:
            position.append(f"byte {self.offset}")
        if not position:
            return self.message
        return f"{self.message} ({', '.join(position)})"


class UnsupportedEncoding(MalformedDocument):
    """Declared encoding is unknown and strict resolution was requested."""

    def __init__(self, encoding: str) -> None:
        super().__init__(f"Unsupported encoding: '{encoding}'")
        self.encoding = encoding
