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
"""Libraries for creating reproducible archives.

Archives created by this package are plain ZIP archives with the following constrains:

1. all file entries have fixed permission bit, datetime and "created by" system set.
2. all file entries use the same compression method and compression level.
3. the files are arranged in alphabet order of their archive-relative path.
4. directories are not recorded as entries, only the regular files under them.

With these constrains, the same archive will always be generated from the same input,
    so the checksum of the archive can be used for regression detection.
"""

from zipfile import ZIP_DEFLATED

# some constants that required for making a reproducible archive build
# NOTE: 1980-01-01 is the earliest datetime the ZIP DOS date field can hold.
DEFAULT_TIMESTAMP = (1980, 1, 1, 0, 0, 0)
FILE_PERMISSION = 0o644
# always record entries as created on unix, regardless of the building platform
CREATE_SYSTEM_UNIX = 3

DEFAULT_COMPRESSION = ZIP_DEFLATED
DEFAULT_COMPRESS_LEVEL = 6

DEFAULT_READ_SIZE = 1024**2  # 1MiB
