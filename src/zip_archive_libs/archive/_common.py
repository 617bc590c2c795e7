# Copyright 2025 TIER IV, INC. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import os
import stat
from fnmatch import fnmatchcase
from pathlib import PurePosixPath
from typing import Iterable, Union
from zipfile import ZipInfo

from zip_archive_libs.archive import CREATE_SYSTEM_UNIX, DEFAULT_TIMESTAMP

from .errors import DuplicateEntryError, InvalidEntryNameError

FileMode = Union[int, str]


def normalize_entry_name(name: str) -> str:
    """Convert <name> into the archive-relative POSIX path used as entry name."""
    if os.sep != "/":
        name = name.replace(os.sep, "/")
    _path = PurePosixPath(name)
    if _path.is_absolute():
        raise InvalidEntryNameError(f"absolute entry name is not allowed: {name!r}")
    if ".." in _path.parts:
        raise InvalidEntryNameError(f"entry name escapes archive root: {name!r}")

    _normalized = str(_path)
    if _normalized in ("", "."):
        raise InvalidEntryNameError(f"empty entry name: {name!r}")
    return _normalized


def check_no_duplicates(names: Iterable[str]) -> None:
    _seen: set[str] = set()
    for _name in names:
        if _name in _seen:
            raise DuplicateEntryError(f"duplicated entry name in archive: {_name!r}")
        _seen.add(_name)


def parse_file_mode(mode: FileMode) -> int:
    """Parse permission bits given as int or as octal string like `0644`."""
    if isinstance(mode, str):
        try:
            mode = int(mode, 8)
        except ValueError:
            raise ValueError(f"invalid octal file mode: {mode!r}") from None
    if not 0 <= mode <= 0o7777:
        raise ValueError(f"file mode out of range: {oct(mode)}")
    return mode


def normalize_excludes(excludes: Iterable[str]) -> tuple[str, ...]:
    """Convert exclude patterns into POSIX form without trailing slash."""
    return tuple(_pattern.replace(os.sep, "/").rstrip("/") for _pattern in excludes)


def is_excluded(rel_path: str, excludes: Iterable[str]) -> bool:
    """Check <rel_path> against relative paths or glob patterns in <excludes>.

    <excludes> must be already normalized with normalize_excludes.
    """
    for _pattern in excludes:
        if rel_path == _pattern or fnmatchcase(rel_path, _pattern):
            return True
    return False


def make_zipinfo(arcname: str, *, file_mode: int) -> ZipInfo:
    """Create a ZipInfo with all the metadata fixed for a reproducible archive."""
    _zipinfo = ZipInfo(filename=arcname, date_time=DEFAULT_TIMESTAMP)
    _zipinfo.create_system = CREATE_SYSTEM_UNIX
    _zipinfo.external_attr = (stat.S_IFREG | file_mode) << 16
    return _zipinfo
