# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

EXIT_OK = 0
ERR_INVALID_ARGUMENTS = 1
ERR_INVALID_BASE_FOLDER = 2
ERR_INVALID_SEARCH_FOLDER = 3
ERR_TRAVERSAL_FAILED = 4


class DupFinderError(Exception):
    """Base class for errors that end the run with a non-zero exit code."""

    exit_code = ERR_INVALID_ARGUMENTS

    def __init__(self, message: str, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ArgumentError(DupFinderError):
    exit_code = ERR_INVALID_ARGUMENTS


class FolderValidationError(DupFinderError, ValueError):
    """Base or search folder is missing or is not a directory."""

    exit_code = ERR_INVALID_BASE_FOLDER


class TraversalError(DupFinderError):
    """A directory listing or entry lookup failed in the middle of a walk."""

    exit_code = ERR_TRAVERSAL_FAILED
