# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import os
import stat
from collections.abc import Iterable, Iterator
from typing import NamedTuple

from dup_finder.errors import TraversalError

DEFAULT_EXCLUDED_DIR_NAMES = (".git",)


class WalkEntry(NamedTuple):
    path: str
    is_dir: bool
    size: int
    is_root: bool = False


class TreeWalker:
    """
    Pre-order traversal of a directory tree.

    The root is always yielded first. Sub-directories are yielded (and
    descended into) only when walking recursively and when their name is
    not in the excluded list. Regular files are yielded unconditionally;
    symbolic links and special files are never yielded or followed.
    """

    def __init__(self,
                 recursive: bool,
                 excluded_dir_names: Iterable[str] | None = None) -> None:
        if excluded_dir_names is None:
            excluded_dir_names = DEFAULT_EXCLUDED_DIR_NAMES
        self.recursive = recursive
        self.excluded_dir_names = {
            name.casefold() for name in excluded_dir_names
        }

    def is_excluded(self, dir_name: str) -> bool:
        return dir_name.casefold() in self.excluded_dir_names

    def walk(self, root: str) -> Iterator[WalkEntry]:
        root = os.path.normpath(root)
        yield WalkEntry(path=root, is_dir=True, size=0, is_root=True)

        for dir_path, dir_names, file_names in os.walk(
                root, topdown=True, onerror=self._raise_traversal_error):
            if dir_path != root:
                yield WalkEntry(path=dir_path, is_dir=True, size=0)

            # Prune in place so os.walk never enters skipped subtrees
            if self.recursive:
                dir_names[:] = sorted(
                    name for name in dir_names
                    if not self.is_excluded(name)
                    and not os.path.islink(os.path.join(dir_path, name))
                )
            else:
                dir_names[:] = []

            for name in sorted(file_names):
                file_path = os.path.join(dir_path, name)
                try:
                    st = os.lstat(file_path)
                except OSError as e:
                    raise TraversalError(
                        f"Unable to read entry '{file_path}': {e}") from e
                if not stat.S_ISREG(st.st_mode):
                    continue
                yield WalkEntry(path=file_path, is_dir=False,
                                size=st.st_size)

    @staticmethod
    def _raise_traversal_error(error: OSError) -> None:
        raise TraversalError(
            f"Unable to read folder '{error.filename}': {error}") from error
