"""JSON file helpers shared by the repositories.

Read/parse/write problems are logged and re-raised as RemoteFailure so callers
only ever deal with the planner's error kinds.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path

from mealboard.domain.errors import RemoteFailure

logger = logging.getLogger(__name__)


def read_json(path, default):
    """Return the parsed file content, or `default` when the file does not exist yet."""
    path = Path(path)
    if not path.exists():
        return default
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path.name}: {e}")
        raise RemoteFailure(f"Couldn't read {path.name}.") from e
    except OSError as e:
        logger.error(f"Error reading {path.name}: {e}")
        raise RemoteFailure(f"Couldn't read {path.name}.") from e


def atomic_write(path, data):
    """Write JSON through a temp file in the same directory, then move it into place."""
    path = Path(path)
    tmp_path = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=".json")
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            json.dump(data, tmp, indent=2, ensure_ascii=False)
        shutil.move(tmp_path, str(path))
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error writing {path.name}: {e}")
        raise RemoteFailure(f"Couldn't write {path.name}.") from e
    finally:
        if tmp_path and os.path.exists(tmp_path):
            try:
                os.remove(tmp_path)
            except OSError:
                pass


__all__ = ['read_json', 'atomic_write']
