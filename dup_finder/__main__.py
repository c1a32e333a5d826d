# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import sys

from dup_finder.cli_args import ArgumentParserAdapter
from dup_finder.dup_finder import DupFinder
from dup_finder.dup_finder_config import (
    BASE_RECURSIVE_MARKER,
    SEARCH_RECURSIVE_MARKER,
    DupFinderConfig,
)
from dup_finder.errors import (
    ERR_INVALID_ARGUMENTS,
    EXIT_OK,
    DupFinderError,
)


def main(argv: list[str] | None = None) -> int:
    print()
    try:
        # Parse command-line arguments (folders, recursion tokens, flags)
        args = ArgumentParserAdapter().parse(argv)

        config = DupFinderConfig(
            base_folder_path=args.base_folder,
            search_folder_path=args.search_folder,
            base_recursive=DupFinderConfig.is_recursive_token(
                args.base_recursion, BASE_RECURSIVE_MARKER),
            search_recursive=DupFinderConfig.is_recursive_token(
                args.search_recursion, SEARCH_RECURSIVE_MARKER),
            excluded_dir_names=args.exclude_dir,
            max_file_size_str=args.max_size,
            log_file_path=args.log_file,
            true_duplicate_percent=args.true_duplicate_percent,
        )
    except DupFinderError as e:
        print(f"ERROR: {e}")
        return e.exit_code
    except ValueError as e:
        print(f"ERROR: {e}")
        return ERR_INVALID_ARGUMENTS

    print(f"OK: Using main/base folder: {config.base_folder_path}"
          f" Recursive: {config.base_recursive}")
    print(f"OK: Using search folder: {config.search_folder_path}"
          f" Recursive: {config.search_recursive}")

    if config.folders_are_same():
        print("Base/Search folder cannot be the same.")
        return EXIT_OK

    try:
        DupFinder().run(config=config)
    except DupFinderError as e:
        print(f"\nERROR: {e}")
        return e.exit_code
    return EXIT_OK


# Allow running the script directly
if __name__ == "__main__":
    sys.exit(main())
