"""Swagger 2.0 document loader.

Reads a YAML or JSON file into the typed Document tree.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from openapi_surface.errors import MalformedDocumentError

from .document import Document

logger = logging.getLogger(__name__)


def load_document(file_path: Path) -> Document:
    """Load a Swagger 2.0 file (YAML or JSON) into a Document."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDocumentError(f"{file_path}: not UTF-8 text") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedDocumentError(f"{file_path}: not valid YAML or JSON") from e
    return parse_document(data)


def parse_document(data) -> Document:
    """Validate an already-deserialized document.

    Raises MalformedDocumentError when the top level is unusable, e.g. the
    title or the paths section is missing.
    """
    if isinstance(data, Document):
        return data
    if not isinstance(data, dict):
        raise MalformedDocumentError(
            f"expected a mapping at the top level, got {type(data).__name__}"
        )
    try:
        document = Document.model_validate(data)
    except ValidationError as e:
        raise MalformedDocumentError(_summarize(e)) from e
    logger.debug(
        "parsed %r: %d paths, %d definitions",
        document.info.title,
        len(document.paths),
        len(document.definitions),
    )
    return document


def _summarize(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<root>"
        problems.append(f"{location}: {item['msg']}")
    return "malformed document: " + "; ".join(problems)
