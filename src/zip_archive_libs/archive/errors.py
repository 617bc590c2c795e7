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
"""Errors raised by the archivers.

Each error also subclasses the closest built-in exception, so callers can
    catch either the archiver error or the built-in one.
"""


class ArchiverError(Exception): ...


class NotFoundError(ArchiverError, FileNotFoundError):
    """The source file/directory, or the requested entry, doesn't exist."""


class ArchiveIOError(ArchiverError, OSError):
    """Failed to read the sources or write the output archive."""


class DuplicateEntryError(ArchiverError, ValueError):
    """Two inputs resolve to the same archive-relative name."""


class InvalidEntryNameError(ArchiverError, ValueError):
    """The entry name is empty, absolute or escapes the archive root."""


class AlreadyArchivedError(ArchiverError, RuntimeError):
    """The archiver has already been used for an archive operation."""


class UnsupportedArchiveTypeError(ArchiverError, ValueError): ...
