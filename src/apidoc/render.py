"""Serialize scanned documents to JSON or YAML."""

import json

import yaml

from apidoc.parser.base import Document

DEFAULT_FORMAT = "json"
FORMATS = ("json", "yaml")


def render_documents(documents: list[Document], fmt: str = DEFAULT_FORMAT) -> str:
    """Render documents as a JSON array or a YAML sequence."""
    data = [doc.model_dump() for doc in documents]

    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    elif fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ValueError(f"Unknown output format: {fmt}")
