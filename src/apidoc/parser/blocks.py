"""Locate annotated comment blocks in source files.

Supports /* ... */ block comments and runs of // or # line comments.
Only comments containing an @api marker are returned.
"""

import logging
import re
from pathlib import Path

from pydantic import BaseModel

from .tags import TAG_PREFIX

logger = logging.getLogger(__name__)

BLOCK_COMMENT = re.compile(r"/\*+(.*?)\*/", re.DOTALL)
LINE_COMMENT = re.compile(r"^[ \t]*(//|#)[ ]?(.*)$")
BLOCK_DECORATION = re.compile(r"^[ \t]*\*(?!/)[ ]?")


class CommentBlock(BaseModel):
    """Comment text with its position in the source file."""

    text: str
    line: int  # 1-based line where text starts
    file: str = ""


def read_blocks(file_path: Path) -> list[CommentBlock]:
    """Read a source file and return its annotated comment blocks."""
    text = file_path.read_text(encoding="utf-8")
    return find_blocks(text, file=str(file_path))


def find_blocks(text: str, file: str = "") -> list[CommentBlock]:
    """Return annotated comment blocks in source order."""
    blocks = _block_comments(text, file) + _line_comments(text, file)
    blocks.sort(key=lambda b: b.line)
    logger.debug("found %d annotated blocks in %s", len(blocks), file or "<input>")
    return blocks


def _block_comments(text: str, file: str) -> list[CommentBlock]:
    result = []
    for match in BLOCK_COMMENT.finditer(text):
        body = match.group(1)
        if TAG_PREFIX not in body:
            continue
        lines = [BLOCK_DECORATION.sub("", line) for line in body.split("\n")]
        line = text.count("\n", 0, match.start(1)) + 1
        result.append(CommentBlock(text="\n".join(lines), line=line, file=file))
    return result


def _line_comments(text: str, file: str) -> list[CommentBlock]:
    # Blank out block comments so their contents are not read twice.
    stripped = BLOCK_COMMENT.sub(lambda m: "\n" * m.group(0).count("\n"), text)

    result = []
    run: list[str] = []
    start = 0
    for lineno, line in enumerate(stripped.split("\n"), start=1):
        match = LINE_COMMENT.match(line)
        if match:
            if not run:
                start = lineno
            run.append(match.group(2))
            continue
        if run:
            _flush(run, start, file, result)
            run = []
    if run:
        _flush(run, start, file, result)
    return result


def _flush(run: list[str], start: int, file: str, result: list[CommentBlock]) -> None:
    body = "\n".join(run)
    if TAG_PREFIX in body:
        result.append(CommentBlock(text=body + "\n", line=start, file=file))
