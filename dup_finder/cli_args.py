# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import argparse
import sys
from typing import NoReturn

from dup_finder.errors import ArgumentError

# base folder, search folder, base recursion, search recursion
POSITIONAL_COUNT = 4
HELP_FLAGS = ("-h", "--help")

USAGE_EXAMPLE = (
    "  /B=base folder; /S=search folder; R=recursive; N=not recursive\n"
    '  example:  dup "c:\\Images" "c:\\Temp" /BR /SN'
)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        # Any malformed command line, wrong argument count included
        self.print_usage(sys.stderr)
        sys.stderr.write(USAGE_EXAMPLE + "\n")
        raise ArgumentError(f"Invalid arguments: {message}")


class ArgumentParserAdapter:
    def __init__(self):
        # Initialize the argument parser with a description
        self.parser = _ArgumentParser(
            prog="dup",
            description="Find files in the search folder that duplicate"
            " files of the base folder",
            epilog=USAGE_EXAMPLE,
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        self._add_arguments()

    def _add_arguments(self):
        self.parser.add_argument(
            "base_folder",
            type=str,
            help="Mandatory parameter: folder with the original files",
        )
        self.parser.add_argument(
            "search_folder",
            type=str,
            help="Mandatory parameter: folder to search for duplicates",
        )
        self.parser.add_argument(
            "base_recursion",
            type=str,
            help="Mandatory parameter: /BR to scan base sub-folders,"
                 " anything else (e.g. /BN) to skip them",
        )
        self.parser.add_argument(
            "search_recursion",
            type=str,
            help="Mandatory parameter: /SR to scan search sub-folders,"
                 " anything else (e.g. /SN) to skip them",
        )

        self.parser.add_argument(
            "--log-file",
            "-l",
            type=str,
            default=None,
            help="Optional: path to the results log."
                 " Defaults to <executable>.log next to the executable",
        )
        self.parser.add_argument(
            "--exclude-dir",
            "-e",
            type=str,
            nargs="*",
            default=None,
            help="Optional: folder names that are never scanned"
                 " (case-insensitive). Defaults to .git",
        )
        self.parser.add_argument(
            "--max-size",
            type=str,
            default=None,
            help="Optional: skip files of this size or larger"
                 " (e.g. 75MB, 1G). Defaults to 75MB",
        )
        self.parser.add_argument(
            "--true-duplicate-percent",
            action="store_true",
            help="Optional: report duplicates as a percentage of"
                 " processed search files",
        )

    def parse(self, argv: list[str] | None = None) -> argparse.Namespace:
        # Parse and return the command-line arguments
        if argv is None:
            argv = sys.argv[1:]
        return self.parser.parse_args(self._positionals_last(argv))

    @staticmethod
    def _positionals_last(argv: list[str]) -> list[str]:
        """
        Move the four leading folder/recursion tokens behind '--' so
        tokens such as '-BR' or '-' are never taken for options.
        """
        if len(argv) < POSITIONAL_COUNT or argv[0].startswith("--"):
            return argv
        if any(token in HELP_FLAGS for token in argv):
            return argv
        positionals = argv[:POSITIONAL_COUNT]
        options = argv[POSITIONAL_COUNT:]
        return [*options, "--", *positionals]
