"""Tag-driven scanner for annotated comment blocks.

Walks a comment block with a Cursor, dispatches on the markers listed in
apidoc.parser.tags and assembles a Document from the extracted pieces.
Text between markers is skipped one code point at a time.
"""

import logging

from .base import Document, Example, Param, Request, Status
from .cursor import EOF, Cursor
from .errors import MalformedTagError, MissingArgumentError
from .tags import NESTED_TAGS, TAG_PREFIX, TOP_LEVEL_TAGS, Tag

logger = logging.getLogger(__name__)


def scan(data: bytes | str, line: int = 1, file: str = "") -> Document:
    """Scan one comment block into a Document.

    Raises ScanError on the first malformed tag; no partial Document is returned.
    """
    return Scanner(data, line=line, file=file).scan()


class Scanner:
    """Scans a single comment block."""

    def __init__(self, data: bytes | str, line: int = 1, file: str = ""):
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.cursor = Cursor(data, line=line, file=file)
        self._tag_line = line
        self._handlers = {
            Tag.URL: self._scan_url,
            Tag.METHODS: self._scan_methods,
            Tag.VERSION: self._scan_version,
            Tag.GROUP: self._scan_group,
            Tag.QUERY: self._scan_query,
            Tag.REQUEST: self._scan_request,
            Tag.STATUS: self._scan_status,
            Tag.API: self._scan_api,
        }

    def scan(self) -> Document:
        doc = Document()
        while True:
            tag = self._match_tag(TOP_LEVEL_TAGS)
            if tag is None:
                if self.cursor.next() is EOF:
                    break
                continue
            logger.debug("%s:%d: %s", self.cursor.file, self._tag_line, tag.value)
            self._handlers[tag](doc)
        return doc

    def _match_tag(self, tags: tuple[Tag, ...]) -> Tag | None:
        for tag in tags:
            if self.cursor.match(tag.value):
                self._tag_line = self.cursor.line_number()
                return tag
        return None

    # Top-level tags

    def _scan_url(self, doc: Document) -> None:
        doc.url = self._required_line(Tag.URL)

    def _scan_methods(self, doc: Document) -> None:
        doc.methods = self._required_line(Tag.METHODS)

    def _scan_version(self, doc: Document) -> None:
        doc.version = self._required_line(Tag.VERSION)

    def _scan_group(self, doc: Document) -> None:
        doc.group = self._required_line(Tag.GROUP)

    def _scan_api(self, doc: Document) -> None:
        """Summary line, then an optional description line."""
        doc.summary = self._required_line(Tag.API)

        mark = self.cursor.mark()
        line = self.cursor.next_line()
        if TAG_PREFIX in line:
            self.cursor.reset(mark)
            return
        doc.description = line

    def _scan_query(self, doc: Document) -> None:
        doc.queries.append(self._scan_param())

    def _scan_request(self, doc: Document) -> None:
        content_type = self.cursor.next_line()
        doc.request = Request(content_type=content_type, **self._scan_block())

    def _scan_status(self, doc: Document) -> Status:
        code, _ = self._required_word(Tag.STATUS)
        content_type, eol = self._required_word(Tag.STATUS, allow_eol=True)
        summary = "" if eol else self.cursor.next_line()
        status = Status(code=code, content_type=content_type, summary=summary, **self._scan_block())
        # TODO: attach Status to Document once response docs have a field in the model.
        logger.debug(
            "discarding status %s (%s): %d headers, %d params, %d examples",
            status.code,
            status.content_type,
            len(status.headers),
            len(status.params),
            len(status.examples),
        )
        return status

    # Nested tags

    def _scan_block(self, tags: tuple[Tag, ...] = NESTED_TAGS) -> dict:
        """Collect headers, params and examples until the end of input.

        Returns the collected fields as keyword arguments for Request/Status.
        """
        headers: dict[str, str] = {}
        params: list[Param] = []
        examples: list[Example] = []

        while True:
            tag = self._match_tag(tags)
            if tag is Tag.HEADER:
                key, value = self._scan_header()
                headers[key] = value
            elif tag is Tag.PARAM:
                params.append(self._scan_param())
            elif tag is Tag.EXAMPLE:
                examples.append(self._scan_example())
            elif self.cursor.next() is EOF:
                break

        return {"headers": headers, "params": params, "examples": examples}

    def _scan_header(self) -> tuple[str, str]:
        key = ""
        while not key:
            key, eol = self.cursor.next_word()
            if eol:
                raise self._error(MalformedTagError, f"{Tag.HEADER.value} requires a name and a value")
        value = self.cursor.next_line()
        if not value:
            raise self._error(MalformedTagError, f"{Tag.HEADER.value} {key} requires a value")
        return key, value

    def _scan_param(self) -> Param:
        """Fill name, optional and description in order, stopping at end of line.

        Word reads land in name until one is non-empty; the type slot is
        never filled, so the word after the name is left for description.
        """
        fields = {"name": ""}
        while not fields["name"]:
            fields["name"], eol = self.cursor.next_word()
            if eol:
                return Param(**fields)

        if self.cursor.match("optional"):
            fields["optional"] = True
        fields["description"] = self.cursor.next_line()
        return Param(**fields)

    def _scan_example(self) -> Example:
        lang, eol = self._required_word(Tag.EXAMPLE, allow_eol=True)

        lines = [] if eol else [self.cursor.next_line()]
        while not self.cursor.at_end:
            mark = self.cursor.mark()
            line = self.cursor.next_line()
            if TAG_PREFIX in line:
                self.cursor.reset(mark)
                break
            lines.append(line)

        return Example(lang=lang, code="\n".join(lines).strip())

    # Helpers

    def _required_line(self, tag: Tag) -> str:
        line = self.cursor.next_line()
        if not line:
            raise self._error(MissingArgumentError, f"{tag.value} requires an argument")
        return line

    def _required_word(self, tag: Tag, allow_eol: bool = False) -> tuple[str, bool]:
        """Read the next non-empty word on the current line."""
        while True:
            word, eol = self.cursor.next_word()
            if word and (allow_eol or not eol):
                return word, eol
            if eol:
                raise self._error(MissingArgumentError, f"{tag.value} is missing required arguments")

    def _error(self, cls, message: str):
        # Reported against the line of the most recent tag.
        return cls(message, file=self.cursor.file, line=self._tag_line)
