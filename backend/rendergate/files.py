"""JSON file adapter — reading documents and writing reports.

Setup problems surface as GateSetupError subclasses; evaluation never sees them.
"""

import json
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError

from rendergate.errors import DocumentNotFoundError, DocumentParseError

ModelT = TypeVar("ModelT", bound=BaseModel)


def read_json(path: Union[str, Path], label: str, hint: str = "") -> Any:
    """Read and parse a JSON document.

    Args:
        path: File to read
        label: Human name used in error messages (e.g. "Renderer manifest")
        hint: Extra guidance appended to the not-found message

    Raises:
        DocumentNotFoundError: the file does not exist
        DocumentParseError: the file is not valid JSON
    """
    path = Path(path)
    if not path.is_file():
        raise DocumentNotFoundError(label, path, hint)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DocumentParseError(label, path, str(e)) from e


def read_model(path: Union[str, Path], label: str, model: type[ModelT], hint: str = "") -> ModelT:
    """Read a JSON document straight into a typed model."""
    data = read_json(path, label, hint)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DocumentParseError(label, path, _summarize(e)) from e


def write_json(path: Union[str, Path], payload: Union[BaseModel, Any]) -> Path:
    """Write a report (or plain data) as indented JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(mode="json", exclude_none=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path


def _summarize(error: ValidationError, limit: Optional[int] = 3) -> str:
    details = []
    for detail in error.errors()[:limit]:
        location = ".".join(str(part) for part in detail.get("loc", ())) or "(root)"
        details.append(f"{location} {detail.get('msg', 'is invalid')}")
    return "; ".join(details)
