"""Position reader over a UTF-8 encoded comment block."""

EOF = None


def _rune_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC0 <= lead < 0xE0:
        return 2
    if 0xE0 <= lead < 0xF0:
        return 3
    if 0xF0 <= lead < 0xF8:
        return 4
    return 1


class Cursor:
    """Reads one code point, word or line at a time.

    Every consuming call (next, next_line, next_word, a successful match)
    remembers where it started so that a single backup() can undo it.
    Lookahead that spans more than one call should use mark()/reset().
    """

    def __init__(self, data: bytes, line: int = 1, file: str = ""):
        self.data = data
        self.line = line  # line of data[0] in the source file
        self.file = file
        self.pos = 0
        self._undo: int | None = None

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def line_number(self) -> int:
        """Line in the source file at the current position."""
        return self.line + self.data.count(b"\n", 0, self.pos)

    def mark(self) -> int:
        return self.pos

    def reset(self, mark: int) -> None:
        self.pos = mark
        self._undo = None

    def backup(self) -> None:
        """Undo the last consuming call. Does nothing if already undone."""
        if self._undo is None:
            return
        self.pos = self._undo
        self._undo = None

    def next(self) -> str | None:
        """Return the next code point, or EOF at the end of input."""
        start = self.pos
        ch = self._read()
        self._undo = start
        return ch

    def next_line(self) -> str:
        """Read through the next newline and return the line trimmed."""
        start = self.pos
        chars = []
        while True:
            ch = self._read()
            if ch is EOF:
                break
            chars.append(ch)
            if ch == "\n":
                break
        self._undo = start
        return "".join(chars).strip()

    def next_word(self) -> tuple[str, bool]:
        """Read through the next whitespace character.

        Returns the trimmed word and whether the line ended with it
        (a newline terminator or end of input).
        """
        start = self.pos
        chars = []
        eol = True
        while True:
            ch = self._read()
            if ch is EOF:
                break
            chars.append(ch)
            if ch.isspace():
                eol = ch == "\n"
                break
        self._undo = start
        return "".join(chars).strip(), eol

    def match(self, literal: str) -> bool:
        """Consume literal if the input continues with it; otherwise leave the position alone."""
        encoded = literal.encode("utf-8")
        if self.pos + len(encoded) > len(self.data):
            return False
        if not self.data.startswith(encoded, self.pos):
            return False
        self._undo = self.pos
        self.pos += len(encoded)
        return True

    def _read(self) -> str | None:
        if self.pos >= len(self.data):
            return EOF
        width = _rune_width(self.data[self.pos])
        chunk = self.data[self.pos:self.pos + width]
        try:
            ch = chunk.decode("utf-8")
        except UnicodeDecodeError:
            ch, width = "\ufffd", 1
        self.pos += width
        return ch
