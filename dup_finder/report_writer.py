# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import sys
from pathlib import Path

from dup_finder import utils
from dup_finder.duplicate_index import DuplicateIndex

BASE_FILE_PREFIX = "Base File:    "
DUPLICATE_PREFIX = "  - Duplicate:"


def default_log_path(executable: str | None = None) -> str:
    """
    Log file next to the running executable, with its extension
    replaced by '.log' and its name lowercased. When started with
    'python -m', the package folder stands in for the executable.
    """
    if executable is None:
        executable = sys.argv[0]
    if not executable:
        # Interactive interpreter, no script name to go by
        return str(Path("dup.log").resolve())
    path = Path(executable).resolve()
    if path.stem == "__main__":
        path = path.parent
    # File name lowercased, folder left as is
    return str(path.with_name(path.stem.lower() + ".log"))


class ReportWriter:
    def __init__(self, log_file_path: str) -> None:
        self.log_file_path = log_file_path

    @staticmethod
    def render(index: DuplicateIndex) -> str:
        # One block per canonical file that has duplicates, index order
        lines = []
        for record in index.records_with_duplicates():
            lines.append(
                BASE_FILE_PREFIX + utils.double_quote(record.canonical_path))
            for path in record.duplicate_paths:
                lines.append(DUPLICATE_PREFIX + utils.double_quote(path))
            lines.append("")
        return "".join(line + "\n" for line in lines)

    def write(self, index: DuplicateIndex) -> bool:
        """Replace the log file with the report; False if it failed."""
        log_path = Path(self.log_file_path)
        try:
            log_path.unlink(missing_ok=True)
            with open(log_path, "w", encoding="utf-8") as f:
                f.write(self.render(index))
        except OSError as e:
            print(f"\nERROR: Failed to save to file {log_path}: {e}")
            return False
        return True
