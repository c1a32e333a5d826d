# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

from pathlib import Path

from dup_finder.duplicate_index import DuplicateIndex
from dup_finder.fingerprint import Fingerprint
from dup_finder.report_writer import ReportWriter, default_log_path

FP_A = Fingerprint("000000000002", "aa" * 32)
FP_B = Fingerprint("000000000003", "bb" * 32)


def make_index() -> DuplicateIndex:
    index = DuplicateIndex()
    index.add(FP_A, "/base/a.txt", is_base_scan=True)
    index.add(FP_B, "/base/lonely.txt", is_base_scan=True)
    index.add(FP_A, "/search/b.txt", is_base_scan=False)
    index.add(FP_A, "/search/my copy.txt", is_base_scan=False)
    return index


def test_render_groups_duplicates_under_base_file() -> None:
    text = ReportWriter.render(make_index())

    assert text == (
        'Base File:    "/base/a.txt"\n'
        '  - Duplicate:"/search/b.txt"\n'
        '  - Duplicate:"/search/my copy.txt"\n'
        "\n"
    )


def test_render_without_duplicates_is_empty() -> None:
    index = DuplicateIndex()
    index.add(FP_A, "/base/a.txt", is_base_scan=True)

    assert ReportWriter.render(index) == ""


def test_write_replaces_existing_log(tmp_path: Path) -> None:
    log_path = tmp_path / "dup.log"
    log_path.write_text("stale results from an earlier run\n")

    assert ReportWriter(str(log_path)).write(make_index())

    text = log_path.read_text(encoding="utf-8")
    assert "stale" not in text
    assert text.startswith('Base File:    "/base/a.txt"\n')


def test_write_failure_is_reported(tmp_path: Path, capsys) -> None:
    log_path = tmp_path / "missing_folder" / "dup.log"

    assert not ReportWriter(str(log_path)).write(make_index())
    assert "ERROR: Failed to save to file" in capsys.readouterr().out


def test_default_log_path_next_to_executable(tmp_path: Path) -> None:
    executable = tmp_path / "tools" / "dup.exe"

    assert default_log_path(str(executable)) == str(
        (tmp_path / "tools" / "dup.log").resolve())


def test_default_log_path_without_extension(tmp_path: Path) -> None:
    executable = tmp_path / "bin" / "dup"

    assert default_log_path(str(executable)) == str(
        (tmp_path / "bin" / "dup.log").resolve())


def test_default_log_path_for_module_run(tmp_path: Path) -> None:
    main_module = tmp_path / "dup_finder" / "__main__.py"

    assert default_log_path(str(main_module)) == str(
        (tmp_path / "dup_finder.log").resolve())


def test_default_log_name_is_lowercased(tmp_path: Path) -> None:
    executable = tmp_path / "Tools" / "DUP.EXE"

    assert default_log_path(str(executable)) == str(
        (tmp_path / "Tools").resolve() / "dup.log")
