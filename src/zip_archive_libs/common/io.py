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
"""Common shared helper functions for IO."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Iterable

DEFAULT_FILE_CHUNK_SIZE = 1024**2  # 1MiB


def cal_file_digests(
    fpath: str | Path,
    algorithms: Iterable[str],
    chunk_size: int = DEFAULT_FILE_CHUNK_SIZE,
) -> tuple[int, dict[str, hashlib._Hash]]:
    """Generate file digests with all <algorithms> in one pass.

    Returns:
        A tuple of (file size, {<algorithm>: Hash object}).
    """
    digestobjs = {_alg: hashlib.new(_alg) for _alg in algorithms}
    file_size = 0

    buf = bytearray(chunk_size)  # Reusable buffer to reduce allocations.
    view = memoryview(buf)
    with open(fpath, "rb") as f:
        while size := f.readinto(buf):
            file_size += size
            for _digestobj in digestobjs.values():
                _digestobj.update(view[:size])
    return file_size, digestobjs


def remove_file(_fpath: Path, *, ignore_error: bool = True) -> None:
    """Unlink the regular file <_fpath>, directories are never removed."""
    try:
        _fpath.unlink(missing_ok=True)
    except OSError:
        if not ignore_error:
            raise
