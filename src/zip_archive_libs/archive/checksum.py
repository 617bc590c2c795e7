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
"""Checksums of the output archive, used for regression detection."""

from __future__ import annotations

import base64
from os import PathLike
from pathlib import Path

from pydantic import BaseModel, ConfigDict, computed_field

from zip_archive_libs.common.io import DEFAULT_FILE_CHUNK_SIZE, cal_file_digests

from .errors import ArchiveIOError, NotFoundError

CHECKSUM_ALGS = ("md5", "sha1", "sha256", "sha512")


class ArchiveChecksums(BaseModel):
    """Size and digests of one archive file.

    The base64 variants are standard base64 of the raw digest bytes.
    """

    model_config = ConfigDict(frozen=True)

    size: int
    md5: str
    sha1: str
    sha256: str
    sha512: str

    @computed_field
    @property
    def base64sha256(self) -> str:
        return base64.b64encode(bytes.fromhex(self.sha256)).decode()

    @computed_field
    @property
    def base64sha512(self) -> str:
        return base64.b64encode(bytes.fromhex(self.sha512)).decode()


def checksum_archive(
    path: str | PathLike, *, chunk_size: int = DEFAULT_FILE_CHUNK_SIZE
) -> ArchiveChecksums:
    """Calculate size and all the supported digests of the archive at <path>."""
    _path = Path(path)
    try:
        _size, _digests = cal_file_digests(_path, CHECKSUM_ALGS, chunk_size)
    except FileNotFoundError:
        raise NotFoundError(f"archive not found: {_path}") from None
    except OSError as e:
        raise ArchiveIOError(f"failed to read archive {_path}: {e!r}") from e

    return ArchiveChecksums(
        size=_size, **{_alg: _obj.hexdigest() for _alg, _obj in _digests.items()}
    )
