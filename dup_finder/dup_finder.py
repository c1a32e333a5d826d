# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

from dup_finder.duplicate_index import DuplicateIndex
from dup_finder.dup_finder_config import DupFinderConfig
from dup_finder.report_writer import ReportWriter
from dup_finder.scan_run import ScanCounters, ScanRun


class DupFinder:
    def __init__(self) -> None:
        # Internal state for storing results
        self.index = DuplicateIndex()
        self.base_counters: ScanCounters | None = None
        self.search_counters: ScanCounters | None = None

    def run(self, config: DupFinderConfig) -> DuplicateIndex:
        # Clear internal state before running
        self._clear_results()

        self.cfg = config

        scan = ScanRun(index=self.index,
                       max_file_size=self.cfg.max_file_size,
                       excluded_dir_names=self.cfg.excluded_dir_names)

        # Stage 1: every fingerprint of the base folder becomes canonical
        self.base_counters = scan.run(root=self.cfg.base_folder_path,
                                      recursive=self.cfg.base_recursive,
                                      is_base_scan=True)
        self._print_base_summary(self.base_counters)

        # Stage 2: search folder files only attach to known fingerprints
        self.search_counters = scan.run(root=self.cfg.search_folder_path,
                                        recursive=self.cfg.search_recursive,
                                        is_base_scan=False)
        self._print_search_summary(
            self.search_counters,
            true_ratio=self.cfg.true_duplicate_percent)

        # Stage 3: write the duplicates log
        if ReportWriter(self.cfg.log_file_path).write(self.index):
            print(f"Finished.  See {self.cfg.log_file_path} for results.")
        print()
        return self.index

    def _clear_results(self) -> None:
        # Clear all previous results
        self.index = DuplicateIndex()
        self.base_counters = None
        self.search_counters = None

    @staticmethod
    def _print_elapsed(counters: ScanCounters) -> None:
        print(f"  -Total files processed: {counters.files_processed}")
        print(f"  -Total Gb processed: {counters.gigabytes_processed:.2f}")
        print(f"  -Elapsed time: {counters.elapsed_seconds:.2f}s"
              f" [{counters.throughput:.2f}gb/s]")

    @staticmethod
    def _print_skipped(counters: ScanCounters) -> None:
        print(f"  -Sub folders Processed: {counters.subfolders_visited}")
        print(f"  -Empty files, Skipped: "
              f"{counters.empty_or_oversized_skipped}")
        print(f"  -Unreadable files, Skipped: {counters.unreadable_skipped}")
        print()

    def _print_base_summary(self, counters: ScanCounters) -> None:
        print()
        print("Base Folder Processed")
        self._print_elapsed(counters)
        print(f"  -Base folder, Unique Files: {counters.base_unique_count}")
        print(f"  -Base folder, Duplicates: {counters.base_duplicate_count}")
        self._print_skipped(counters)

    def _print_search_summary(self,
                              counters: ScanCounters,
                              true_ratio: bool = False) -> None:
        percent = counters.duplicate_percent(true_ratio=true_ratio)
        print()
        print("Search Folder Processed")
        self._print_elapsed(counters)
        print(f"  -Duplicates: {counters.base_duplicate_count}"
              f" [{percent:.1f}%]")
        self._print_skipped(counters)
