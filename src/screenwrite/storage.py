"""Reading and writing screenplay documents as JSON.

Documents are either a bare ``{"elements": [...]}`` value or a project
wrapping one under ``content``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from screenwrite.config import get_logger
from screenwrite.exceptions import DocumentError, DocumentLoadError, check_document_path
from screenwrite.models import Project, ScriptContent

logger = get_logger(__name__)


def content_from_data(data: Any) -> ScriptContent:
    """Build script content from decoded JSON (bare content or a project)."""
    if isinstance(data, dict) and "content" in data and "elements" not in data:
        return Project.model_validate(data).content
    return ScriptContent.model_validate(data)


def content_from_json(raw: str) -> ScriptContent:
    """Parse script content, falling back to an empty document.

    Malformed JSON or data that does not describe a screenplay is logged
    and yields an empty document instead of raising.
    """
    try:
        return content_from_data(json.loads(raw))
    except (json.JSONDecodeError, PydanticValidationError, TypeError) as e:
        logger.warning("Unreadable script content, using empty document", error=str(e))
        return ScriptContent()


def content_to_json(content: ScriptContent, indent: int | None = None) -> str:
    """Serialize script content with the camelCase keys editors expect."""
    return content.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


def load_script_content(path: Path | str) -> ScriptContent:
    """Load script content from a JSON file.

    Args:
        path: File holding a script content or project JSON document.

    Returns:
        The parsed script content.

    Raises:
        ScreenwriteFileNotFoundError: If the file does not exist.
        DocumentLoadError: If the file is not a readable screenplay document.
    """
    check_document_path(path)
    path = Path(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        content = content_from_data(data)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(
            message=f"Invalid JSON in {path}",
            hint="Check the file for trailing commas or truncated content",
            details={"file": str(path), "line": e.lineno, "column": e.colno},
        ) from e
    except UnicodeDecodeError as e:
        raise DocumentLoadError(
            message=f"{path} is not UTF-8 text",
            hint="Save the document with UTF-8 encoding",
            details={"file": str(path), "position": e.start, "reason": e.reason},
        ) from e
    except PydanticValidationError as e:
        raise DocumentLoadError(
            message=f"{path} does not describe a screenplay",
            hint='Expected {"elements": [...]} or a project with "content"',
            details={"file": str(path), "errors": e.error_count()},
        ) from e

    logger.info("Loaded screenplay", path=str(path), elements=len(content.elements))
    return content


def save_script_content(content: ScriptContent, path: Path | str) -> Path:
    """Write script content to a JSON file.

    Raises:
        DocumentError: If the file cannot be written.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content_to_json(content, indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise DocumentError(
            message=f"Could not write {path}",
            hint="Check that the directory exists and is writable",
            details={"file": str(path), "reason": str(e)},
        ) from e

    logger.info("Saved screenplay", path=str(path), elements=len(content.elements))
    return path
