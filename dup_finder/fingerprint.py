# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import os
from pathlib import Path
from typing import NamedTuple

from dup_finder import utils

# 12 digits hold sizes up to 999,999,999,999 bytes
SIZE_FIELD_WIDTH = 12
MAX_FINGERPRINT_SIZE = 10**SIZE_FIELD_WIDTH - 1


class Fingerprint(NamedTuple):
    """
    Content key of a file: zero-padded size followed by the SHA256 digest.
    Two files with the same fingerprint are treated as identical.
    """

    size: str
    digest: str

    def __str__(self) -> str:
        return self.size + self.digest


def format_size(size: int) -> str:
    if size < 0 or size > MAX_FINGERPRINT_SIZE:
        raise ValueError(
            f"File size {size} does not fit in"
            f" {SIZE_FIELD_WIDTH} digits")
    return f"{size:0{SIZE_FIELD_WIDTH}d}"


def fingerprint_file(file_path: str | Path,
                     size: int | None = None) -> Fingerprint:
    """
    Build the fingerprint of a single file.

    Args:
        file_path: File to read.
        size: Size already known from the directory walk. Looked up
            with stat() when omitted.

    Raises:
        OSError: The file could not be opened or fully read.
    """
    if size is None:
        size = os.stat(file_path).st_size
    return Fingerprint(format_size(size), utils.calc_file_sha256(file_path))
