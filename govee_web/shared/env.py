"""Environment utilities for resolving Docker secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)

SECRET_FILE_SUFFIX = "_FILE"
SECRET_PREFIXES = ("GOVEE_",)


def load_secret_file_variables(prefixes: Iterable[str] = SECRET_PREFIXES) -> List[str]:
    """
    Expose ``KEY_FILE`` secrets as ``KEY`` environment variables.

    Only keys starting with one of ``prefixes`` are considered, and a
    ``KEY`` that is already set always wins over its file. Unreadable
    files are logged and skipped.

    Returns:
        The names of the variables that were populated.
    """
    prefixes = tuple(prefixes)
    resolved: List[str] = []

    for key, file_path in list(os.environ.items()):
        if not key.endswith(SECRET_FILE_SUFFIX) or not key.startswith(prefixes):
            continue
        target_key = key[: -len(SECRET_FILE_SUFFIX)]
        if os.environ.get(target_key) or not file_path:
            continue
        try:
            os.environ[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.load_failed",
                extra={"key": key, "path": file_path, "error": str(exc)},
            )
            continue
        resolved.append(target_key)

    return resolved
