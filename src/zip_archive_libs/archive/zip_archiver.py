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
"""Reproducible ZIP archiver."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from os import PathLike
from pathlib import Path
from typing import Callable, Collection, Generator, Mapping, Union
from zipfile import ZIP_DEFLATED, ZIP_STORED, ZipFile

from zip_archive_libs.archive import (
    DEFAULT_COMPRESS_LEVEL,
    DEFAULT_COMPRESSION,
    FILE_PERMISSION,
)
from zip_archive_libs.common.io import remove_file

from ._common import (
    FileMode,
    check_no_duplicates,
    is_excluded,
    make_zipinfo,
    normalize_entry_name,
    normalize_excludes,
    parse_file_mode,
)
from .base import Archiver, ArchiverState, register_archiver
from .errors import (
    AlreadyArchivedError,
    ArchiveIOError,
    ArchiverError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

ZIP_ARCHIVE_TYPE = "zip"
SUPPORTED_COMPRESSION = (ZIP_STORED, ZIP_DEFLATED)

# an entry source is either the in-memory content, or the file to read it from
EntrySource = Union[bytes, Path]


def _assert_valid_file(path: Path) -> None:
    if not path.is_file():
        raise NotFoundError(f"could not archive missing file: {path}")


def _assert_valid_dir(path: Path) -> None:
    if not path.is_dir():
        raise NotFoundError(f"could not archive missing directory: {path}")


class ZipArchiver(Archiver):
    """Create a reproducible ZIP archive at <output_path>.

    Every entry is written with fixed datetime, permission bits and "created by"
        system, the compression method and level are fixed per archiver, and
        the entries are written in alphabet order. Identical inputs always result
        in byte-identical archives.

    Policies:
    1. inputs are validated before the output is touched, a validation failure
        keeps the archiver usable.
    2. once the output is opened, the archiver is consumed no matter the operation
        succeeds or not, further operations raise AlreadyArchivedError.
    3. if the operation fails after the output is opened, the partial output
        archive will be removed.
    """

    archive_type = ZIP_ARCHIVE_TYPE

    def __init__(
        self,
        output_path: str | PathLike,
        *,
        compression: int = DEFAULT_COMPRESSION,
        compresslevel: int | None = DEFAULT_COMPRESS_LEVEL,
        output_file_mode: FileMode = FILE_PERMISSION,
    ) -> None:
        if compression not in SUPPORTED_COMPRESSION:
            raise ValueError(f"unsupported compression method: {compression}")

        self._output = Path(output_path)
        self._compression = compression
        # compresslevel is meaningless for ZIP_STORED
        self._compresslevel = compresslevel if compression == ZIP_DEFLATED else None
        self._file_mode = parse_file_mode(output_file_mode)
        self._state = ArchiverState.UNOPENED

    @property
    def output_path(self) -> Path:
        return self._output

    @property
    def state(self) -> ArchiverState:
        return self._state

    def _check_unopened(self) -> None:
        if self._state != ArchiverState.UNOPENED:
            raise AlreadyArchivedError(
                f"archiver for {self._output} is already {self._state.value}"
            )

    @contextmanager
    def _open(self) -> Generator[Callable[[str, EntrySource], None]]:
        """Open the output archive and yield the entry writer.

        The output archive is always closed on exit. If the operation fails after
            the output archive is created, the partial output is removed. If the
            output cannot be created at all, whatever is at the output path is
            left untouched.
        """
        self._check_unopened()
        self._state = ArchiverState.OPEN
        logger.debug(f"open {self._output} for archiving")
        _output_created = False
        try:
            self._output.parent.mkdir(parents=True, exist_ok=True)
            with ZipFile(
                self._output,
                mode="w",
                compression=self._compression,
                compresslevel=self._compresslevel,
            ) as output_f:
                _output_created = True
                yield lambda name, src: self._add_entry(output_f, name, src)
        except Exception as e:
            if _output_created:
                logger.warning(
                    f"archiving failed, remove partial output {self._output}"
                )
                remove_file(self._output)
            if isinstance(e, OSError) and not isinstance(e, ArchiverError):
                raise ArchiveIOError(
                    f"failed to write archive {self._output}: {e!r}"
                ) from e
            raise
        finally:
            self._state = ArchiverState.CLOSED

    def _add_entry(self, zipf: ZipFile, arcname: str, src: EntrySource) -> None:
        if isinstance(src, Path):
            try:
                src = src.read_bytes()
            except FileNotFoundError as e:
                raise NotFoundError(f"source file disappeared: {src}") from e
            except OSError as e:
                raise ArchiveIOError(f"failed to read {src}: {e!r}") from e

        logger.debug(f"add entry {arcname} ({len(src)} bytes)")
        zipf.writestr(
            make_zipinfo(arcname, file_mode=self._file_mode),
            src,
            compress_type=self._compression,
            compresslevel=self._compresslevel,
        )

    def _write_entries(self, entries: list[tuple[str, EntrySource]]) -> None:
        """Write the already validated and ordered <entries> to the output."""
        with self._open() as add_entry:
            for _name, _src in entries:
                add_entry(_name, _src)
        logger.info(f"archived {len(entries)} entries to {self._output}")

    def archive_content(self, content: bytes, name: str) -> None:
        self._check_unopened()
        self._write_entries([(normalize_entry_name(name), content)])

    def archive_file(self, path: str | PathLike) -> None:
        self._check_unopened()
        _src = Path(path)
        _assert_valid_file(_src)
        self._write_entries([(normalize_entry_name(_src.name), _src)])

    def archive_dir(
        self, path: str | PathLike, *, excludes: Collection[str] = ()
    ) -> None:
        """Archive all regular files under <path>.

        Entries are named by their path relative to <path>, and written in
            alphabet order of that relative path. Directories themselves
            don't result in entries. The output archive itself is skipped
            when it is located under <path>.

        Args:
            path: the directory to archive.
            excludes: relative paths or glob patterns to skip, an excluded
                directory skips its whole subtree.
        """
        self._check_unopened()
        _src_root = Path(path)
        _assert_valid_dir(_src_root)
        excludes = normalize_excludes(excludes)
        _output_resolved = self._output.resolve()

        entries: list[tuple[str, EntrySource]] = []
        for curdir, dirnames, files in os.walk(_src_root):
            curdir = Path(curdir)
            relative_curdir = curdir.relative_to(_src_root)

            # prune in-place so that os.walk skips the excluded subtrees
            dirnames[:] = [
                _dname
                for _dname in dirnames
                if not is_excluded((relative_curdir / _dname).as_posix(), excludes)
            ]

            for _fname in files:
                _src = curdir / _fname
                _relative_src = (relative_curdir / _fname).as_posix()
                if is_excluded(_relative_src, excludes):
                    logger.debug(f"skip excluded {_relative_src}")
                    continue
                if not _src.is_file():
                    continue  # not a regular file, or a dangling symlink
                if _src.resolve() == _output_resolved:
                    logger.debug(f"skip the output archive {_relative_src}")
                    continue
                entries.append((normalize_entry_name(_relative_src), _src))

        entries.sort(key=lambda _entry: _entry[0])
        check_no_duplicates(_name for _name, _ in entries)
        self._write_entries(entries)

    def archive_multiple(self, content: Mapping[str, bytes]) -> None:
        self._check_unopened()
        entries: list[tuple[str, EntrySource]] = [
            (normalize_entry_name(_name), _content)
            for _name, _content in content.items()
        ]
        # NOTE: always sort explicitly, never rely on the mapping's iteration order.
        entries.sort(key=lambda _entry: _entry[0])
        check_no_duplicates(_name for _name, _ in entries)
        self._write_entries(entries)


register_archiver(ZipArchiver, ZIP_ARCHIVE_TYPE)
