from __future__ import annotations

import logging
from pathlib import Path

from .models import Document

LOGGER = logging.getLogger(__name__)


class DocumentReadError(RuntimeError):
    """Raised when an input document cannot be opened, read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Couldn't open {path}: {reason}")
        self.path = path


def load_document(
    path: str | Path, encoding: str = "utf-8", doc_id: str | None = None
) -> Document:
    """Read a whole text file into a Document (doc_id defaults to the file name)."""
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise DocumentReadError(path, "no such file") from exc
    except IsADirectoryError as exc:
        raise DocumentReadError(path, "is a directory") from exc
    except UnicodeDecodeError as exc:
        raise DocumentReadError(path, f"not valid {encoding} text") from exc
    except LookupError as exc:
        raise DocumentReadError(path, f"unknown encoding {encoding!r}") from exc
    except OSError as exc:
        raise DocumentReadError(path, exc.strerror or str(exc)) from exc
    LOGGER.debug("Read %d characters from %s", len(text), path)
    return Document(doc_id=doc_id or path.name, text=text)
