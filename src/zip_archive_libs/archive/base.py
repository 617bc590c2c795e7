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
"""The archiver interface and the archiver registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from os import PathLike
from typing import Any, Collection, Mapping

from .errors import UnsupportedArchiveTypeError

_archiver_register: dict[str, type[Archiver]] = {}


class ArchiverState(str, Enum):
    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


class Archiver(ABC):
    """Base class for archivers that pack sources into one archive file.

    Each archiver instance creates exactly one archive: it is opened by the first
        archive operation and closed when that operation finishes or fails.
        Any further operation raises AlreadyArchivedError.

    This class is NOT safe for multi-thread use.
    """

    archive_type: str

    @abstractmethod
    def archive_content(self, content: bytes, name: str) -> None:
        """Archive <content> as a single entry named <name>."""
        raise NotImplementedError

    @abstractmethod
    def archive_file(self, path: str | PathLike) -> None:
        """Archive the file at <path> as a single entry named by its base name."""
        raise NotImplementedError

    @abstractmethod
    def archive_dir(
        self, path: str | PathLike, *, excludes: Collection[str] = ()
    ) -> None:
        """Archive all regular files under <path>, named relative to <path>."""
        raise NotImplementedError

    @abstractmethod
    def archive_multiple(self, content: Mapping[str, bytes]) -> None:
        """Archive each name-content pair of <content> as an entry."""
        raise NotImplementedError


def register_archiver(_archiver: type[Archiver], archive_type: str) -> None:
    _archiver_register[archive_type] = _archiver


def get_archiver_type(archive_type: str) -> type[Archiver]:
    try:
        return _archiver_register[archive_type]
    except KeyError:
        raise UnsupportedArchiveTypeError(
            f"unsupported archive type: {archive_type}"
        ) from None


def get_archiver(
    archive_type: str, output_path: str | PathLike, **kwargs: Any
) -> Archiver:
    """Create an archiver of <archive_type> that writes to <output_path>."""
    return get_archiver_type(archive_type)(output_path, **kwargs)
