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

"""Candidate accessors and label parsing.

Accessors are pure projections: a missing field yields None, never an
exception. Label parsers return None (or a literal fallback) when the
label does not have the expected shape.
"""

import re
from dataclasses import dataclass
from typing import Optional

from codecomplete.completion.protocol import Candidate

# "<description> - <package>", split on the last separator
_DETAIL_PACKAGE = re.compile(r"(.*)\s-\s(.*)")

# "name(args) : ReturnType - Override method in Base"
_OVERRIDE = re.compile(r"(.*?)\(.*\)\s*:\s*(.*)\s*-\s*Override method")

# Whole-label shapes: "<insertion> - <package>" or "<insertion> : <type> ..."
_LABEL = re.compile(r"([^-:]+?)\s+(?::.*|-\s*(.*))")

_QUALIFIED_NAME = re.compile(r"\w+(?:\.\w+)*")
_BASE_NAME_END = re.compile(r"[<(]")


@dataclass(frozen=True)
class LabelParts:
    """Insertion text and optional package hint parsed from a label."""

    insertion: str
    package: Optional[str] = None


def candidate_type(candidate: Candidate) -> Optional[str]:
    """Per-language kind of a candidate."""
    return candidate.kind


def candidate_detail(candidate: Candidate) -> Optional[str]:
    """Secondary description of a candidate."""
    return candidate.detail


def candidate_documentation(candidate: Candidate) -> Optional[str]:
    """Raw documentation markup of a candidate."""
    return candidate.documentation


def package_of(candidate: Candidate) -> Optional[str]:
    """Package segment of a ``"<description> - <package>"`` detail.

    Args:
        candidate: Candidate to inspect

    Returns:
        The package string, or None if the detail is absent or unshaped
    """
    detail = candidate.detail
    if not detail:
        return None
    match = _DETAIL_PACKAGE.fullmatch(detail)
    if not match:
        return None
    return match.group(2).strip() or None


def parse_override(label: str) -> Optional[str]:
    """Method name of an "Override method" label, or None."""
    match = _OVERRIDE.match(label)
    if not match:
        return None
    return match.group(1).strip() or None


def parse_label(label: str) -> LabelParts:
    """Split a label into insertion text and package hint.

    ``"foo(int) - com.example"`` gives ``LabelParts("foo(int)",
    "com.example")``. Labels without the expected shape are inserted as
    they are.

    Args:
        label: Menu label of the chosen candidate

    Returns:
        Parsed parts
    """
    match = _LABEL.fullmatch(label)
    if not match:
        return LabelParts(insertion=label)

    rest = (match.group(2) or "").strip()
    package = rest if _QUALIFIED_NAME.fullmatch(rest) else None
    return LabelParts(insertion=match.group(1), package=package)


def base_name(insertion: str) -> str:
    """Insertion text truncated at its first ``(`` or ``<``."""
    return _BASE_NAME_END.split(insertion, maxsplit=1)[0]


def import_target(parts: LabelParts) -> Optional[str]:
    """Fully-qualified import for parsed label parts, or None."""
    if not parts.package:
        return None
    return f"{parts.package}.{base_name(parts.insertion)}"
