"""Read documents from a YAML or JSON file"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from docstore.core.models import Document


def _records(raw: Any, path: Path) -> list[dict]:
    """Accept either a top-level list or a mapping with a 'documents' list."""
    if raw is None:
        return []
    if isinstance(raw, dict):
        if "documents" not in raw:
            raise ValueError(f"Invalid {path}: expected a list or a 'documents' key")
        raw = raw["documents"]
    if not isinstance(raw, list):
        raise ValueError(f"Invalid {path}: expected a list of documents")
    return raw


def load_documents(path: Path | str) -> list[Document]:
    """Parse path into Document records. JSON files load as YAML.

    Raises FileNotFoundError if path is missing, ValueError on malformed content.
    """
    path = Path(path)
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e

    docs = []
    for i, record in enumerate(_records(raw, path)):
        try:
            docs.append(Document.model_validate(record))
        except ValidationError as e:
            raise ValueError(f"Invalid document #{i} in {path}: {e}") from e

    logger.info(f"loaded {len(docs)} document(s) from {path}")
    return docs
