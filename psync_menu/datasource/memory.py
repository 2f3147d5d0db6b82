"""Immutable in-memory data source, optionally loaded from a JSON document."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Tuple, Union

from psync_menu.datasource.models import Snapshot, Subject
from psync_menu.protocol.errors import RangeError


def _check_index(index: int, size: int, what: str) -> None:
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < size:
        raise RangeError(f"{what} index {index!r} out of range [0, {size})")


class InMemoryDataSource:
    def __init__(self, subjects: Iterable[Subject]):
        self._subjects: Tuple[Subject, ...] = tuple(subjects)
        self._snapshots: Tuple[Tuple[Snapshot, ...], ...] = tuple(
            tuple(subject.snapshots) for subject in self._subjects
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "InMemoryDataSource":
        """Load `{"subjects": [...]}` from disk, validating every record."""
        document = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(document, dict) or not isinstance(document.get("subjects"), list):
            raise ValueError(f"{path}: expected an object with a 'subjects' list")
        subjects = [
            Subject.model_validate(raw) if hasattr(Subject, "model_validate") else Subject.parse_obj(raw)
            for raw in document["subjects"]
        ]
        return cls(subjects)

    def subject_count(self) -> int:
        return len(self._subjects)

    def subject(self, index: int) -> Subject:
        _check_index(index, len(self._subjects), "subject")
        return self._subjects[index]

    def snapshot_count(self, subject_index: int) -> int:
        _check_index(subject_index, len(self._subjects), "subject")
        return len(self._snapshots[subject_index])

    def snapshot(self, subject_index: int, snapshot_index: int) -> Snapshot:
        _check_index(subject_index, len(self._subjects), "subject")
        snapshots = self._snapshots[subject_index]
        _check_index(snapshot_index, len(snapshots), "snapshot")
        return snapshots[snapshot_index]
