"""
Local JSON file implementation of ScheduleStorage.

All slots live in one JSON object file ({key: text}). Writes go to a
temporary file in the same directory and are swapped in with os.replace,
so a crash mid-write leaves the previous file intact.
"""
import json
import logging
import os
import pathlib
import tempfile
from typing import Dict, Optional, Union

from application.exceptions import ScheduleStorageError

logger = logging.getLogger(__name__)


class FileScheduleStorage:
    """
    File-backed implementation of ScheduleStorage protocol.

    A missing or corrupt file reads as empty; the next write replaces it.
    """

    def __init__(self, path: Union[str, pathlib.Path]):
        """
        Initialize with the storage file path.

        Args:
            path: JSON file holding all slots (created on first write)
        """
        self._path = pathlib.Path(path).expanduser()

    @property
    def path(self) -> pathlib.Path:
        return self._path

    def _read_all(self) -> Dict[str, str]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as e:
            logger.warning("Cannot read schedule storage %s: %s", self._path, e)
            return {}

        try:
            data = json.loads(text)
        except ValueError as e:
            logger.warning("Ignoring corrupt schedule storage %s: %s", self._path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring schedule storage %s: not a JSON object", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: Dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f)
                os.replace(tmp_name, self._path)
            except BaseException:
                pathlib.Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise ScheduleStorageError(f"Cannot write schedule storage {self._path}: {e}") from e

    # =========================================================================
    # ScheduleStorage Protocol Methods
    # =========================================================================

    def get(self, key: str) -> Optional[str]:
        """Read the text stored under a key."""
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        """Write text under a key."""
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug("Stored %d bytes under %s", len(value), key)
