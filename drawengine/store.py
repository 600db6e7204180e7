from __future__ import annotations

import json
import logging
import pathlib
from typing import List, Optional, Protocol, Sequence

from .types import DrawResultRecord, records_to_dicts


class ResultStore(Protocol):
    def save(self, records: Sequence[DrawResultRecord]) -> bool:
        ...

    def load(self) -> List[DrawResultRecord]:
        ...

    def clear(self) -> bool:
        ...


class JsonResultStore:
    """Keeps the latest draw results as a JSON list in a single file."""

    def __init__(self, path: str, logger: Optional[logging.Logger] = None) -> None:
        self._path = pathlib.Path(path)
        self._logger = logger or logging.getLogger("goldpool.store")

    @property
    def path(self) -> pathlib.Path:
        return self._path

    def load(self) -> List[DrawResultRecord]:
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            return [DrawResultRecord.from_dict(item) for item in data]
        except (json.JSONDecodeError, TypeError, ValueError) as exc:
            self._logger.warning("Ignoring unreadable results file %s: %s", self._path, exc)
            return []

    def save(self, records: Sequence[DrawResultRecord]) -> bool:
        payload = json.dumps(records_to_dicts(records), ensure_ascii=False, indent=2)
        try:
            self._path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            self._logger.error("Could not write results to %s: %s", self._path, exc)
            return False
        return True

    def clear(self) -> bool:
        return self.save([])


__all__ = ["JsonResultStore", "ResultStore"]
