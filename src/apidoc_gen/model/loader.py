"""Load API groups from a YAML or JSON document."""

from pathlib import Path

import yaml

from apidoc_gen.errors import DocumentFormatError
from apidoc_gen.model.base import ApiDoc


def load_docs(file_path: Path) -> list[ApiDoc]:
    """Read a YAML/JSON file holding one ApiDoc, a list of them, or ``{docs: [...]}``."""
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentFormatError(f"{file_path}: {e}") from e

    return [ApiDoc.model_validate(item) for item in _doc_items(data, file_path)]


def _doc_items(data, file_path: Path) -> list[dict]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        if "groupName" in data or "group_name" in data:
            return [data]
        for key in ("docs", "apis"):
            if isinstance(data.get(key), list):
                return data[key]
    raise DocumentFormatError(f"{file_path}: expected an API group, a list of groups or a 'docs' list")
