from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

log = logging.getLogger(__name__)


class EventStore:
    """Durable set of event keys that have already been announced.

    Backed by a JSON object file mapping each key to ``true``.  Keys are
    only ever added.  Every new key rewrites the whole file through a
    temporary sibling and ``os.replace``, so the file on disk is always
    either the previous version or the new one.
    """

    def __init__(self, path: Path, seen: dict[str, bool] | None = None) -> None:
        self._path = Path(path)
        self._seen: dict[str, bool] = dict(seen or {})

    @classmethod
    def load(cls, path: Path) -> EventStore:
        """Read the store from ``path``.

        The file must exist and hold a JSON object of ``key: true`` pairs;
        ``FileNotFoundError`` or ``ValueError`` is raised otherwise.
        """
        path = Path(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
        bad = [k for k, v in data.items() if v is not True]
        if bad:
            raise ValueError(f"{path}: non-true values for {len(bad)} key(s), e.g. {bad[0]!r}")

        log.info("Loaded %d known event(s) from %s", len(data), path)
        return cls(path, data)

    def __contains__(self, key: object) -> bool:
        return key in self._seen

    def __len__(self) -> int:
        return len(self._seen)

    def keys(self) -> list[str]:
        return list(self._seen)

    @property
    def path(self) -> Path:
        return self._path

    def add(self, key: str) -> bool:
        """Mark ``key`` as seen and persist immediately.

        Returns True if the key was new, False if it was already present
        (in which case nothing is written).  If the write fails the key is
        not kept in memory either, and the error propagates.
        """
        if key in self._seen:
            return False
        self._seen[key] = True
        try:
            self.save()
        except BaseException:
            del self._seen[key]
            raise
        return True

    def save(self) -> None:
        directory = self._path.parent
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(self._seen, fh, ensure_ascii=False)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
