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
"""Create reproducible ZIP archives from content, files and directories."""

from .archive.base import Archiver, get_archiver, register_archiver
from .archive.checksum import ArchiveChecksums, checksum_archive
from .archive.errors import (
    AlreadyArchivedError,
    ArchiveIOError,
    ArchiverError,
    DuplicateEntryError,
    InvalidEntryNameError,
    NotFoundError,
    UnsupportedArchiveTypeError,
)
from .archive.reader import ZipArchiveReader
from .archive.zip_archiver import ZipArchiver

version = "0.1.0"

__all__ = [
    "Archiver",
    "ZipArchiver",
    "ZipArchiveReader",
    "get_archiver",
    "register_archiver",
    "ArchiveChecksums",
    "checksum_archive",
    "ArchiverError",
    "NotFoundError",
    "ArchiveIOError",
    "DuplicateEntryError",
    "InvalidEntryNameError",
    "AlreadyArchivedError",
    "UnsupportedArchiveTypeError",
    "version",
]
