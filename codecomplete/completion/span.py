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

"""Replace-span resolution.

Finds the region a completion will replace. The end is always the
cursor; the start depends on the profile's span rule.
"""

import logging
from typing import Optional

from codecomplete.completion.protocol import Span
from codecomplete.editing.buffer import TextBuffer
from codecomplete.languages.profile import LanguageProfile, SpanRule

logger = logging.getLogger(__name__)

ANNOTATION_SIGIL = "@"
_SYMBOL_PUNCTUATION = frozenset("_$" + ANNOTATION_SIGIL)
_MARKUP_BOUNDARY = frozenset(" \t\r\n<")


def resolve_span(
    buffer: TextBuffer,
    profile: LanguageProfile,
    cursor: Optional[int] = None,
) -> Span:
    """Compute the span a completion at the cursor replaces.

    Args:
        buffer: Document being edited
        profile: Profile of the document's category
        cursor: Offset to resolve at (defaults to the buffer cursor)

    Returns:
        Span ending at the cursor
    """
    end = buffer.cursor if cursor is None else cursor

    if profile.span_rule == SpanRule.CODE:
        start = _code_start(buffer, end, profile.angle_generics)
    elif profile.span_rule == SpanRule.MARKUP:
        start = _markup_start(buffer, end)
    else:
        raise ValueError(f"Unsupported span rule: {profile.span_rule}")

    logger.debug(f"Resolved {profile.name} span [{start}, {end})")
    return Span(start=start, end=end)


def _code_start(buffer: TextBuffer, cursor: int, angle_generics: bool) -> int:
    position = cursor
    before = buffer.char_before(position)
    if before == "(" or (angle_generics and before == "<"):
        position -= 1

    while _is_symbol_char(buffer.char_before(position)):
        position -= 1

    # Annotation candidates come back without the sigil
    if position < cursor and buffer.char_at(position) == ANNOTATION_SIGIL:
        position += 1
    return position


def _markup_start(buffer: TextBuffer, cursor: int) -> int:
    position = cursor
    while True:
        before = buffer.char_before(position)
        if before is None or before in _MARKUP_BOUNDARY:
            return position
        position -= 1


def _is_symbol_char(char: Optional[str]) -> bool:
    return char is not None and (char.isalnum() or char in _SYMBOL_PUNCTUATION)
