# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dup_finder.errors import (
    ERR_INVALID_BASE_FOLDER,
    ERR_INVALID_SEARCH_FOLDER,
    FolderValidationError,
)
from dup_finder.fingerprint import MAX_FINGERPRINT_SIZE
from dup_finder.report_writer import default_log_path
from dup_finder.scan_run import DEFAULT_MAX_FILE_SIZE
from dup_finder.tree_walker import DEFAULT_EXCLUDED_DIR_NAMES
from dup_finder.utils import str_file_size_to_int

# Only these exact tokens turn recursion on; anything else leaves it off
BASE_RECURSIVE_MARKER = "/BR"
SEARCH_RECURSIVE_MARKER = "/SR"


@dataclass
class DupFinderConfig:
    """
    Configuration class for the Dup Finder module.
    """

    # Folder whose files are kept as the originals.
    # Must be an existing directory.
    base_folder_path: str

    # Folder searched for copies of the base folder files.
    # Must be an existing directory.
    search_folder_path: str

    # Descend into sub-folders of the base folder.
    base_recursive: bool = False

    # Descend into sub-folders of the search folder.
    search_recursive: bool = False

    # Folder names that are never descended into, compared
    # case-insensitively. If None, only '.git' is excluded.
    excluded_dir_names: Optional[List[str]] = None

    # Files of this size or larger are skipped. Human-readable
    # size string (e.g., '75MB', '1 GiB'). If None, 75MB is used.
    max_file_size_str: Optional[str] = None

    # The maximum file size in bytes.
    # Calculates from max_file_size_str
    max_file_size: Optional[int] = None

    # Where the duplicates log is written.
    # If None, the log goes next to the running executable.
    log_file_path: Optional[str] = None

    # Print duplicates / processed files as the search phase percentage
    # instead of the historical processed files / duplicates figure.
    true_duplicate_percent: bool = False

    def __post_init__(self) -> None:
        """
        Post-initialization method to normalize and validate
        the configuration parameters.
        """
        self.base_folder_path = self.normalize_dir_path(
            self.base_folder_path, "Main", ERR_INVALID_BASE_FOLDER)
        self.search_folder_path = self.normalize_dir_path(
            self.search_folder_path, "Search", ERR_INVALID_SEARCH_FOLDER)
        self.excluded_dir_names = self.normalize_dir_names(
            self.excluded_dir_names)
        self.max_file_size = (
            self.normalize_str_file_size(self.max_file_size_str))
        self.log_file_path = self.normalize_file_path(self.log_file_path)

    def folders_are_same(self) -> bool:
        return (self.base_folder_path.casefold()
                == self.search_folder_path.casefold())

    @staticmethod
    def is_recursive_token(token: str, marker: str) -> bool:
        return token == marker

    # Utility functions for normalization
    @staticmethod
    def normalize_dir_path(folder_path: str,
                           label: str,
                           exit_code: int) -> str:
        """
        Resolve a folder path and check that it is an existing directory.
        """
        path = Path(folder_path).expanduser().resolve()
        if not path.exists():
            raise FolderValidationError(
                f"{label} folder does not exist: {folder_path}",
                exit_code=exit_code)
        if not path.is_dir():
            raise FolderValidationError(
                f"{label} folder '{folder_path}' exists,"
                f" but is not a folder",
                exit_code=exit_code)
        return str(path)

    @staticmethod
    def normalize_file_path(file_path: str | None) -> str:
        """
        Resolve the log path, falling back to the executable's log.
        """
        if file_path is None:
            return default_log_path()
        return str(Path(file_path).expanduser().resolve())

    @staticmethod
    def normalize_dir_names(names: list[str] | None) -> list[str]:
        """
        Strip whitespace and drop empty names from the excluded folders.
        """
        if names is None:
            return list(DEFAULT_EXCLUDED_DIR_NAMES)
        return [name.strip() for name in names if name.strip()]

    @staticmethod
    def normalize_str_file_size(size: str | None) -> int:
        """
        Normalize a size string to an integer in bytes.
        """
        if size is None:
            return DEFAULT_MAX_FILE_SIZE

        try:
            value = str_file_size_to_int(size)
        except ValueError as e:
            raise ValueError(f"Invalid size format '{size}': {e}") from e

        if value <= 0:
            raise ValueError(f"Maximum file size must be positive: '{size}'")
        if value > MAX_FINGERPRINT_SIZE + 1:
            raise ValueError(
                f"Maximum file size '{size}' is larger than"
                f" {MAX_FINGERPRINT_SIZE + 1} bytes")
        return value
