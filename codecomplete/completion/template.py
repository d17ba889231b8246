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

"""Template synthesis from flat signatures.

Turns an insertion string such as ``foo(int a, List<String> b)`` into
the snippet ``foo(${1:int a}, ${2:List<String> b})``: every first-level
argument becomes one numbered placeholder whose default is the original
argument text. Brackets nested deeper than the first level are copied
into the placeholder body unchanged, and ``()`` stays as it is.
"""

import logging
import re

from codecomplete.completion.protocol import Placeholder, Template
from codecomplete.editing.snippet import escape_snippet

logger = logging.getLogger(__name__)

_TOKEN = re.compile(r"\(\)|[(<][ \t]*|,[ \t]*|[)>]")
_CLOSER_FOR = {"(": ")", "<": ">"}


def synthesize_template(insertion_text: str) -> Template:
    """Build a placeholder template from an insertion string.

    Single pass over bracket/comma tokens with an explicit depth counter.
    Input with unbalanced or mismatched brackets (``a < b``, ``x)``)
    yields a literal template: the input text and no placeholders.
    Snippet metacharacters (``$``, ``}``, ``\\``) in the input are escaped
    in the template text; placeholder defaults keep the original text.

    Args:
        insertion_text: Flat insertion text from a candidate

    Returns:
        The synthesized template
    """
    parts: list[str] = []
    placeholders: list[Placeholder] = []
    openers: list[str] = []
    default_start = 0
    position = 0

    for match in _TOKEN.finditer(insertion_text):
        parts.append(escape_snippet(insertion_text[position : match.start()]))
        position = match.end()
        token = match.group()
        head = token[0]

        if token == "()":
            parts.append(token)

        elif head in _CLOSER_FOR:
            openers.append(head)
            if len(openers) == 1:
                parts.append(f"{head}${{{len(placeholders) + 1}:")
                default_start = match.end()
            else:
                parts.append(token)

        elif head == ",":
            if len(openers) == 1:
                argument = insertion_text[default_start : match.start()]
                placeholders.append(Placeholder(index=len(placeholders) + 1, default=argument))
                parts.append(f"}}, ${{{len(placeholders) + 1}:")
                default_start = match.end()
            else:
                parts.append(token)

        else:
            if not openers or _CLOSER_FOR[openers[-1]] != head:
                return _literal(insertion_text)
            if len(openers) == 1:
                argument = insertion_text[default_start : match.start()]
                placeholders.append(Placeholder(index=len(placeholders) + 1, default=argument))
                parts.append(f"}}{head}")
            else:
                parts.append(token)
            openers.pop()

    if openers:
        return _literal(insertion_text)

    if not placeholders:
        return Template(source=insertion_text, text=insertion_text)

    parts.append(escape_snippet(insertion_text[position:]))
    template = Template(source=insertion_text, text="".join(parts), placeholders=placeholders)
    logger.debug(f"Synthesized template {template.text!r} from {insertion_text!r}")
    return template


def _literal(insertion_text: str) -> Template:
    logger.debug(f"Unbalanced brackets in {insertion_text!r}; keeping it literal")
    return Template(source=insertion_text, text=insertion_text)
