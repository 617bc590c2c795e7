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
"""Shared test fixtures for zip-archive-libs tests."""

from __future__ import annotations

from pathlib import Path
from zipfile import ZipFile

import pytest

TEST_DATA = Path(__file__).parent / "data"
TEST_FILE = TEST_DATA / "test-file.txt"
TEST_DIR = TEST_DATA / "test-dir"

TEST_DIR_CONTENT = {
    "file1.txt": b"This is file 1",
    "file2.txt": b"This is file 2",
    "file3.txt": b"This is file 3",
}


@pytest.fixture
def test_file() -> Path:
    """Provide the test file, with content `This is test content`."""
    return TEST_FILE


@pytest.fixture
def test_dir() -> Path:
    """Provide the test directory holding file1.txt, file2.txt and file3.txt."""
    return TEST_DIR


@pytest.fixture
def nested_dir(tmp_path: Path) -> Path:
    """Create a directory tree with nested folders and an empty folder."""
    _root = tmp_path / "nested"
    (_root / "a" / "b").mkdir(parents=True)
    (_root / "empty").mkdir()
    (_root / "z.txt").write_bytes(b"z")
    (_root / "a" / "a1.txt").write_bytes(b"a1")
    (_root / "a" / "b" / "b1.bin").write_bytes(bytes(range(256)))
    (_root / "a" / "b" / "b2.txt").write_bytes(b"")
    return _root


def ensure_contents(zipfile_path: Path, wants: dict[str, bytes]) -> None:
    """Assert the archive holds exactly the entries in <wants>."""
    with ZipFile(zipfile_path) as zf:
        _infos = zf.infolist()
        assert len(_infos) == len(wants)
        for _info in _infos:
            assert _info.filename in wants, f"additional file in zip: {_info.filename}"
            assert zf.read(_info) == wants[_info.filename]
