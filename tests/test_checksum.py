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
"""Tests for archive checksums."""

from __future__ import annotations

import base64
import hashlib
from pathlib import Path

import pytest

from zip_archive_libs.archive.checksum import ArchiveChecksums, checksum_archive
from zip_archive_libs.archive.errors import NotFoundError
from zip_archive_libs.archive.zip_archiver import ZipArchiver


@pytest.fixture
def archive_path(tmp_path: Path) -> Path:
    _path = tmp_path / "archive-content.zip"
    ZipArchiver(_path).archive_content(b"This is some content", "content.txt")
    return _path


class TestChecksumArchive:
    def test_digests(self, archive_path: Path):
        _raw = archive_path.read_bytes()
        checksums = checksum_archive(archive_path)

        assert checksums.size == len(_raw)
        assert checksums.md5 == hashlib.md5(_raw).hexdigest()
        assert checksums.sha1 == hashlib.sha1(_raw).hexdigest()
        assert checksums.sha256 == hashlib.sha256(_raw).hexdigest()
        assert checksums.sha512 == hashlib.sha512(_raw).hexdigest()

    def test_base64_digests(self, archive_path: Path):
        """Test base64 digests are base64 of the raw digest bytes."""
        _raw = archive_path.read_bytes()
        checksums = checksum_archive(archive_path)

        assert checksums.base64sha256 == base64.b64encode(
            hashlib.sha256(_raw).digest()
        ).decode()
        assert checksums.base64sha512 == base64.b64encode(
            hashlib.sha512(_raw).digest()
        ).decode()

    def test_serialize(self, archive_path: Path):
        """Test computed base64 digests are included when dumping."""
        checksums = checksum_archive(archive_path)
        _dumped = checksums.model_dump()

        assert _dumped["base64sha256"] == checksums.base64sha256
        assert ArchiveChecksums.model_validate_json(
            checksums.model_dump_json(exclude={"base64sha256", "base64sha512"})
        ) == checksums

    def test_not_found(self, tmp_path: Path):
        with pytest.raises(NotFoundError):
            checksum_archive(tmp_path / "not-exist.zip")
