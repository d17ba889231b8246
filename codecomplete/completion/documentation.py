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

"""Plain-text rendering of candidate documentation markup."""

import re
import textwrap
from typing import Optional

# A tag starts with a letter or "/" right after "<"; "a < b" is text
_TAG = re.compile(r"<(/?)([A-Za-z][\w:-]*)[^<>]*>")

_SUBSTITUTIONS = {
    ("", "p"): "\n",
    ("/", "p"): "\n",
    ("", "br"): " ",
    ("", "li"): " * ",
}


def render_documentation(raw: Optional[str], width: Optional[int] = None) -> str:
    """Render documentation markup as plain text.

    Paragraph tags become line breaks, ``<br/>`` a space and ``<li>`` a
    ``" * "`` bullet. Other tags are dropped and their surrounding text
    kept. Text without tags comes back unchanged.

    Args:
        raw: Documentation markup (None renders as "")
        width: Wrap each rendered line to this many columns

    Returns:
        Plain text
    """
    if not raw:
        return ""

    parts = []
    position = 0
    for match in _TAG.finditer(raw):
        parts.append(raw[position : match.start()])
        closing, name = match.group(1), match.group(2).lower()
        parts.append(_SUBSTITUTIONS.get((closing, name), ""))
        position = match.end()
    parts.append(raw[position:])

    text = "".join(parts)
    if width is None:
        return text
    return "\n".join(textwrap.fill(line, width) if line else "" for line in text.split("\n"))
