"""Audit sinks. Each implements the AuditSink protocol; none of them mutate a record."""

import json
import logging
import threading
from pathlib import Path
from typing import List, Optional, Union

from catalog.domain.models.audit import AuditRecord


class FileAuditSink:
    """Appends one line per record ("ts | actor | action | details") to a log file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def append(self, record: AuditRecord) -> None:
        line = record.format().replace("\n", "\\n")
        with self._lock:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")


class LoggingAuditSink:
    """Writes each record as structured JSON through the logging system."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger("catalog.audit")

    def append(self, record: AuditRecord) -> None:
        self._logger.info(json.dumps({"event": "audit_record", **record.to_dict()}))


class InMemoryAuditSink:
    """Keeps records in a list. Thread-safe."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: List[AuditRecord] = []

    @property
    def records(self) -> List[AuditRecord]:
        with self._lock:
            return list(self._records)

    def append(self, record: AuditRecord) -> None:
        with self._lock:
            self._records.append(record)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
