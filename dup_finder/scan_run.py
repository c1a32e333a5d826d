# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass

from dup_finder import utils
from dup_finder.duplicate_index import DuplicateIndex, RecordOutcome
from dup_finder.fingerprint import fingerprint_file
from dup_finder.tree_walker import TreeWalker, WalkEntry

# 75 MB, files this size or larger are not fingerprinted
DEFAULT_MAX_FILE_SIZE = 75_000_000

# Print a dot every N walked entries and a running total every N dots
ENTRIES_PER_DOT = 25
DOTS_PER_TOTAL = 10


@dataclass
class ScanCounters:
    files_processed: int = 0
    gigabytes_processed: float = 0.0
    empty_or_oversized_skipped: int = 0
    unreadable_skipped: int = 0
    subfolders_visited: int = 0
    base_unique_count: int = 0
    base_duplicate_count: int = 0
    elapsed_seconds: float = 0.0

    @property
    def throughput(self) -> float:
        return utils.gb_per_second(self.gigabytes_processed,
                                   self.elapsed_seconds)

    def duplicate_percent(self, true_ratio: bool = False) -> float:
        """
        Percentage printed next to the search phase duplicate count.

        By default this is processed files over duplicates, the figure
        the tool has always printed. With true_ratio it is duplicates
        over processed files.
        """
        if true_ratio:
            if self.files_processed == 0:
                return 0.0
            return self.base_duplicate_count / self.files_processed * 100.0
        if self.base_duplicate_count == 0:
            return 0.0
        return self.files_processed / self.base_duplicate_count * 100.0


@dataclass
class ScanContext:
    # Lives for one scan; the index outlives it
    index: DuplicateIndex
    counters: ScanCounters
    is_base_scan: bool


class ProgressPrinter:
    def __init__(self) -> None:
        self.entries = 0
        self.dots = 0

    def tick(self, gigabytes_processed: float) -> None:
        self.entries += 1
        if self.entries < ENTRIES_PER_DOT:
            return
        self.entries = 0
        self.dots += 1
        print(".", end="", file=sys.stdout, flush=True)
        if self.dots >= DOTS_PER_TOTAL:
            self.dots = 0
            print(f"\nProcessed: {gigabytes_processed:.2f}Gb")


class ScanRun:
    """
    One traversal of a folder, feeding every file that passes the size
    filter into the shared DuplicateIndex.
    """

    def __init__(self,
                 index: DuplicateIndex,
                 max_file_size: int = DEFAULT_MAX_FILE_SIZE,
                 excluded_dir_names: Iterable[str] | None = None) -> None:
        self.index = index
        self.max_file_size = max_file_size
        self.excluded_dir_names = excluded_dir_names

    def run(self,
            root: str,
            recursive: bool,
            is_base_scan: bool) -> ScanCounters:
        """
        Walk root and fingerprint its files.

        Raises:
            TraversalError: A folder or entry could not be read. The scan
                is abandoned; records added so far stay in the index.
        """
        context = ScanContext(index=self.index,
                              counters=ScanCounters(),
                              is_base_scan=is_base_scan)
        walker = TreeWalker(recursive=recursive,
                            excluded_dir_names=self.excluded_dir_names)
        progress = ProgressPrinter()
        start = time.monotonic()

        for entry in walker.walk(root):
            progress.tick(context.counters.gigabytes_processed)
            if entry.is_root:
                continue
            if entry.is_dir:
                context.counters.subfolders_visited += 1
                continue
            self._process_file(context, entry)

        context.counters.elapsed_seconds = time.monotonic() - start
        return context.counters

    def _process_file(self, context: ScanContext, entry: WalkEntry) -> None:
        counters = context.counters

        if entry.size <= 0:
            counters.empty_or_oversized_skipped += 1
            return

        if entry.size >= self.max_file_size:
            counters.empty_or_oversized_skipped += 1
            print(f"\nSkipping large file: {entry.size} {entry.path}")
            return

        try:
            fingerprint = fingerprint_file(entry.path, entry.size)
        except OSError as e:
            counters.unreadable_skipped += 1
            print(f"\nERROR: Unable to read file {entry.path}: {e}")
            return

        counters.files_processed += 1
        counters.gigabytes_processed += utils.bytes_to_gb(entry.size)

        outcome = context.index.add(fingerprint, entry.path,
                                    context.is_base_scan)
        if outcome is RecordOutcome.CANONICAL:
            counters.base_unique_count += 1
        elif outcome is RecordOutcome.DUPLICATE:
            counters.base_duplicate_count += 1
