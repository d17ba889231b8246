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

"""Snippet template expansion.

Expands snippet bodies written in the common ``$1`` / ``${1:default}``
syntax into a text buffer and records where each tab stop landed.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, runtime_checkable

from codecomplete.editing.buffer import TextBuffer

logger = logging.getLogger(__name__)

_PLAIN_STOP = re.compile(r"\d+")
_BRACED_STOP = re.compile(r"\{(\d+)(:|\})")
_SPECIAL = re.compile(r"[\\$}]")


@runtime_checkable
class TemplateEngine(Protocol):
    """Anything that can expand a snippet body at the buffer cursor."""

    def expand(self, buffer: TextBuffer, template: str) -> Any:
        """Insert the expanded template and place the cursor on its first stop."""
        ...


@dataclass
class TabStop:
    """Position of one numbered stop after expansion (absolute offsets)."""

    index: int
    start: int
    end: int


@dataclass
class Expansion:
    """Result of expanding a template into a buffer."""

    start: int
    end: int
    text: str
    stops: list[TabStop] = field(default_factory=list)

    def stop(self, index: int) -> Optional[TabStop]:
        """Get a stop by number."""
        for tab_stop in self.stops:
            if tab_stop.index == index:
                return tab_stop
        return None


def escape_snippet(text: str) -> str:
    """Escape text so a snippet body inserts it verbatim."""
    return _SPECIAL.sub(r"\\\g<0>", text)


class SnippetExpander:
    """Default ``TemplateEngine`` working on any ``TextBuffer``.

    Supports ``$n``, ``${n}``, ``${n:default}`` (defaults may nest) and
    ``\\$`` / ``\\}`` / ``\\\\`` escapes. ``$0`` marks the exit point.
    Mirrored stops keep the position of their first occurrence.
    """

    def parse(self, template: str) -> tuple[str, list[TabStop]]:
        """Parse a template into plain text and relative stops.

        Args:
            template: Snippet body

        Returns:
            Tuple of (expanded text, stops ordered for traversal)
        """
        parts: list[str] = []
        stops: dict[int, TabStop] = {}
        self._parse(template, 0, parts, stops, nested=False)

        ordered = sorted((s for s in stops.values() if s.index > 0), key=lambda s: s.index)
        if 0 in stops:
            ordered.append(stops[0])
        return "".join(parts), ordered

    def expand(self, buffer: TextBuffer, template: str) -> Expansion:
        """Insert a template at the cursor.

        The cursor ends on the first numbered stop, else on ``$0``, else
        after the inserted text.

        Args:
            buffer: Target buffer
            template: Snippet body

        Returns:
            Expansion with absolute stop offsets
        """
        text, relative = self.parse(template)
        start = buffer.cursor
        buffer.insert(text)

        stops = [TabStop(s.index, start + s.start, start + s.end) for s in relative]
        expansion = Expansion(start=start, end=start + len(text), text=text, stops=stops)

        buffer.goto(stops[0].start if stops else expansion.end)
        logger.debug(f"Expanded snippet {template!r} with {len(stops)} stops")
        return expansion

    def _parse(
        self,
        source: str,
        i: int,
        parts: list[str],
        stops: dict[int, TabStop],
        nested: bool,
    ) -> int:
        while i < len(source):
            ch = source[i]
            if ch == "\\" and i + 1 < len(source) and source[i + 1] in "$}\\":
                parts.append(source[i + 1])
                i += 2
                continue
            if nested and ch == "}":
                return i + 1
            if ch == "$":
                plain = _PLAIN_STOP.match(source, i + 1)
                if plain:
                    offset = _size(parts)
                    stops.setdefault(int(plain.group()), TabStop(int(plain.group()), offset, offset))
                    i = plain.end()
                    continue

                braced = _BRACED_STOP.match(source, i + 1)
                if braced:
                    index = int(braced.group(1))
                    start = _size(parts)
                    i = braced.end()
                    if braced.group(2) == ":":
                        i = self._parse(source, i, parts, stops, nested=True)
                    stops.setdefault(index, TabStop(index, start, _size(parts)))
                    continue

            parts.append(ch)
            i += 1
        return i


def _size(parts: list[str]) -> int:
    return sum(len(p) for p in parts)
