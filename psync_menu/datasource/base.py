"""Read contract for subject/snapshot providers.

Indices are stable for the lifetime of the process. Reads must be O(1) or
O(log n) and must raise `RangeError` for any index outside the current
bounds, negative indices included.
"""

from __future__ import annotations

from typing import Protocol

from psync_menu.datasource.models import Snapshot, Subject


class DataSource(Protocol):
    def subject_count(self) -> int:
        ...

    def subject(self, index: int) -> Subject:
        ...

    def snapshot_count(self, subject_index: int) -> int:
        ...

    def snapshot(self, subject_index: int, snapshot_index: int) -> Snapshot:
        ...
