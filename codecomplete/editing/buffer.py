# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
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

"""Text buffer interface used by the completion pipeline.

The pipeline never touches an editor directly. Hosts adapt their
document type to ``TextBuffer``; ``StringBuffer`` is the in-memory
implementation used for headless rendering and tests.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class TextBuffer(Protocol):
    """Minimal editable document with a single cursor.

    Offsets are 0-indexed character positions. ``insert`` writes at the
    cursor and leaves the cursor after the inserted text.
    """

    @property
    def text(self) -> str:
        """Full document text."""
        ...

    @property
    def cursor(self) -> int:
        """Current cursor offset."""
        ...

    def goto(self, offset: int) -> None:
        """Move the cursor."""
        ...

    def char_before(self, offset: int) -> Optional[str]:
        """Character just before ``offset`` or None at the buffer start."""
        ...

    def char_at(self, offset: int) -> Optional[str]:
        """Character at ``offset`` or None at the buffer end."""
        ...

    def insert(self, text: str) -> None:
        """Insert text at the cursor."""
        ...

    def delete(self, start: int, end: int) -> None:
        """Delete the region ``[start, end)``."""
        ...


class StringBuffer:
    """In-memory ``TextBuffer`` backed by a Python string."""

    def __init__(self, text: str = "", cursor: Optional[int] = None):
        """Initialize the buffer.

        Args:
            text: Initial content
            cursor: Initial cursor offset (defaults to the end)
        """
        self._text = text
        self._cursor = len(text) if cursor is None else self._clamp(cursor)

    @classmethod
    def from_marked(cls, marked: str, marker: str = "|") -> "StringBuffer":
        """Build a buffer from text with the cursor written as ``marker``."""
        offset = marked.index(marker)
        return cls(marked[:offset] + marked[offset + len(marker) :], offset)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def goto(self, offset: int) -> None:
        self._cursor = self._clamp(offset)

    def char_before(self, offset: int) -> Optional[str]:
        if offset <= 0 or offset > len(self._text):
            return None
        return self._text[offset - 1]

    def char_at(self, offset: int) -> Optional[str]:
        if offset < 0 or offset >= len(self._text):
            return None
        return self._text[offset]

    def substring(self, start: int, end: int) -> str:
        return self._text[start:end]

    def insert(self, text: str) -> None:
        self._text = self._text[: self._cursor] + text + self._text[self._cursor :]
        self._cursor += len(text)

    def delete(self, start: int, end: int) -> None:
        start, end = self._clamp(min(start, end)), self._clamp(max(start, end))
        self._text = self._text[:start] + self._text[end:]
        # Cursor follows the text it was sitting in
        if self._cursor >= end:
            self._cursor -= end - start
        elif self._cursor > start:
            self._cursor = start

    def marked(self, marker: str = "|") -> str:
        """Render the text with the cursor shown as ``marker``."""
        return self._text[: self._cursor] + marker + self._text[self._cursor :]

    def _clamp(self, offset: int) -> int:
        return max(0, min(offset, len(self._text)))

    def __repr__(self) -> str:
        return f"StringBuffer({self.marked()!r})"
