"""Auto-detect the API description version of a file."""

from pathlib import Path

import yaml


def detect_format(file_path: Path) -> str:
    """Detect which API description grammar a file uses.

    Returns: 'swagger2', 'openapi3', or 'unknown'.
    """
    # YAML is a superset of JSON, so one parse covers both
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, yaml.YAMLError):
        return "unknown"

    if isinstance(data, dict):
        return _version_of(data)
    return "unknown"


def _version_of(data: dict) -> str:
    if str(data.get("swagger", "")).startswith("2"):
        return "swagger2"
    if str(data.get("openapi", "")).startswith("3"):
        return "openapi3"
    return "unknown"
