# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import hashlib
from pathlib import Path

import dup_finder.utils as utils
import pytest


# calc_file_sha256
def test_sha256_known_content(tmp_path: Path) -> None:
    content = b"hello world"
    file_path = tmp_path / "test.txt"
    file_path.write_bytes(content)

    expected_hash = hashlib.sha256(content).hexdigest()

    assert utils.calc_file_sha256(str(file_path)) == expected_hash


def test_sha256_large_file(tmp_path: Path) -> None:
    large_content = b"a" * (65536 * 3 + 123)  # more than 3 block sizes
    file_path = tmp_path / "large.bin"
    file_path.write_bytes(large_content)

    expected_hash = hashlib.sha256(large_content).hexdigest()

    assert utils.calc_file_sha256(file_path,
                                  block_size=65536) == expected_hash


def test_sha256_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        utils.calc_file_sha256(tmp_path / "missing.bin")


# str_file_size_to_int
@pytest.mark.parametrize(
    "size_str, expected",
    [
        ("1B", 1),
        ("1K", 1000),
        ("1KB", 1000),
        ("75MB", 75_000_000),
        ("1G", 1000**3),
        ("1TB", 1000**4),
        ("1KiB", 1024),
        ("1Mi", 1024**2),
        ("1GiB", 1024**3),
        ("123", 123),
        ("  2.5 MB ", int(2.5 * 1000**2)),
        ("10mb", 10 * 1000**2),
    ],
)
def test_str_file_size_to_int_valid(size_str: str, expected: int) -> None:
    assert utils.str_file_size_to_int(size_str) == expected


@pytest.mark.parametrize(
    "invalid_str",
    [
        "abc",
        "10XB",     # unknown unit
        "1.2.3GB",  # multiple dots
        "MB",       # no number
        ".",        # just a dot
        "",         # empty string
    ],
)
def test_str_file_size_to_int_invalid(invalid_str: str) -> None:
    with pytest.raises(ValueError):
        utils.str_file_size_to_int(invalid_str)


def test_bytes_to_gb() -> None:
    assert utils.bytes_to_gb(1024**3) == 1.0
    assert utils.bytes_to_gb(512 * 1024**2) == 0.5


def test_gb_per_second_without_elapsed_time() -> None:
    assert utils.gb_per_second(2.0, 0.0) == 0.0
    assert utils.gb_per_second(2.0, 4.0) == 0.5


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("/data/a.txt", '"/data/a.txt"'),
        ('"/data/a.txt"', '"/data/a.txt"'),
        ('  "/data/my file.txt" ', '"/data/my file.txt"'),
        ("", '""'),
    ],
)
def test_double_quote(raw: str, expected: str) -> None:
    assert utils.double_quote(raw) == expected
