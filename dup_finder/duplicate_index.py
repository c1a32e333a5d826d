# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

from dup_finder.fingerprint import Fingerprint


class RecordOutcome(enum.Enum):
    CANONICAL = "canonical"
    DUPLICATE = "duplicate"
    IGNORED = "ignored"


@dataclass
class CanonicalRecord:
    # First file seen with this fingerprint during the base scan
    canonical_path: str

    # Every later file with the same fingerprint, in the order found
    duplicate_paths: list[str] = field(default_factory=list)

    @property
    def has_duplicates(self) -> bool:
        return bool(self.duplicate_paths)


class DuplicateIndex:
    """
    Fingerprint to canonical record mapping shared by both scans.

    The first file seen with a fingerprint during the base scan becomes
    the canonical file. Any later file with a known fingerprint, from
    either scan, is attached to that record as a duplicate. Search scan
    files with an unknown fingerprint are ignored.

    Records are kept, and iterated, in insertion order.
    """

    def __init__(self) -> None:
        self._records: dict[Fingerprint, CanonicalRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, fingerprint: object) -> bool:
        return fingerprint in self._records

    def __iter__(self) -> Iterator[Fingerprint]:
        return iter(self._records)

    def get(self, fingerprint: Fingerprint) -> CanonicalRecord | None:
        return self._records.get(fingerprint)

    def add(self,
            fingerprint: Fingerprint,
            path: str,
            is_base_scan: bool) -> RecordOutcome:
        record = self._records.get(fingerprint)
        if record is not None:
            record.duplicate_paths.append(path)
            return RecordOutcome.DUPLICATE

        if not is_base_scan:
            return RecordOutcome.IGNORED

        self._records[fingerprint] = CanonicalRecord(canonical_path=path)
        return RecordOutcome.CANONICAL

    def records(self) -> Iterator[CanonicalRecord]:
        return iter(self._records.values())

    def records_with_duplicates(self) -> list[CanonicalRecord]:
        return [record for record in self._records.values()
                if record.has_duplicates]
