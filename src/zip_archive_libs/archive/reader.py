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
"""Read back the entries of an archive without extracting it."""

from __future__ import annotations

from os import PathLike
from typing import IO, Generator
from zipfile import ZipFile, ZipInfo

from typing_extensions import Self

from zip_archive_libs.archive import DEFAULT_READ_SIZE

from .errors import NotFoundError


class ZipArchiveReader:
    """Helper class for reading the entries of a ZIP archive.

    This class is NOT safe for multi-thread, create separated instance
        for each worker thread if used in multi-threaded environment.
    """

    def __init__(
        self,
        _f: ZipFile | str | PathLike,
        *,
        read_chunk_size: int = DEFAULT_READ_SIZE,
        close_on_exit: bool = True,
    ) -> None:
        if isinstance(_f, ZipFile):
            self._f = _f
        else:
            try:
                self._f = ZipFile(_f, mode="r")
            except FileNotFoundError:
                raise NotFoundError(f"archive not found: {_f}") from None

        self._close_on_exit = close_on_exit
        self._chunk_size = read_chunk_size

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._close_on_exit:
            self.close()
        return False

    def close(self) -> None:
        self._f.close()

    def list_entries(self) -> list[str]:
        """List entry names in the order they are stored in the archive."""
        return self._f.namelist()

    def get_entry_info(self, name: str) -> ZipInfo:
        try:
            return self._f.getinfo(name)
        except KeyError:
            raise NotFoundError(f"entry {name=} not found in the archive!") from None

    def open_entry(self, name: str) -> IO[bytes]:
        return self._f.open(self.get_entry_info(name))

    def read_entry(self, name: str) -> bytes:
        with self.open_entry(name) as _entry_reader:
            return _entry_reader.read()

    def stream_entry(
        self, name: str, *, read_size: int | None = None
    ) -> Generator[bytes]:
        read_size = self._chunk_size if read_size is None else read_size
        with self.open_entry(name) as _entry_reader:
            while _chunk := _entry_reader.read(read_size):
                yield _chunk

    def read_all(self) -> dict[str, bytes]:
        """Read all the entries into a dict of entry name to content."""
        return {_name: self.read_entry(_name) for _name in self.list_entries()}
