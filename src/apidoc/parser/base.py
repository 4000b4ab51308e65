"""Data models for scanned API documentation.

The scanner turns one annotated comment block into a Document.
Nested records are frozen once their extraction routine returns them.
"""

from pydantic import BaseModel, ConfigDict


class Param(BaseModel):
    """A single named input value (query or body parameter)."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    param_type: str = ""  # never filled by the scanner, see Scanner._scan_param
    optional: bool = False
    description: str = ""


class Example(BaseModel):
    """A code sample attached to a request or status block."""

    model_config = ConfigDict(frozen=True)

    lang: str  # json / xml / curl ...
    code: str = ""


class Request(BaseModel):
    """Request body description from an @apiRequest block."""

    model_config = ConfigDict(frozen=True)

    content_type: str = ""
    headers: dict[str, str] = {}
    params: list[Param] = []
    examples: list[Example] = []


class Status(BaseModel):
    """Response description from an @apiStatus block."""

    model_config = ConfigDict(frozen=True)

    code: str
    content_type: str
    summary: str = ""
    headers: dict[str, str] = {}
    params: list[Param] = []
    examples: list[Example] = []


class Document(BaseModel):
    """Everything extracted from one comment block."""

    url: str = ""
    methods: str = ""  # raw, e.g. "GET POST"
    version: str = ""
    group: str = ""
    summary: str = ""
    description: str = ""
    queries: list[Param] = []
    request: Request | None = None
