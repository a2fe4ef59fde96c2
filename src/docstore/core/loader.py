"""Load documents from a YAML or JSON file"""

from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from docstore.models import Document


_documents = TypeAdapter(list[Document])


def load_documents(path: str | Path) -> list[Document]:
    """Parse path into Documents.

    The file holds either a list of documents or a mapping with a 'documents'
    list. JSON files work too since JSON is a subset of YAML.
    Raises ValueError if the file is missing, unparseable, or invalid.
    """
    path = Path(path)
    if not path.is_file():
        raise ValueError(f"Document file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path}: {e}") from e

    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"Invalid {path}: missing 'documents' list")
        data = data["documents"]
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path}: expected a list of documents")

    try:
        return _documents.validate_python(data)
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path}: {e}") from e
