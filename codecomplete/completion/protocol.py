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

"""Completion protocol types.

Defines the data structures passed between the completion stages:
server records become ``Candidate`` objects, the span resolver produces
a ``Span``, the synthesizer a ``Template`` and the presenter a
``PresentationResult``.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from codecomplete.languages.profile import SyntacticCategory


class Candidate(BaseModel):
    """One suggestion returned by the code-intelligence server."""

    model_config = ConfigDict(frozen=True)

    kind: Optional[str] = Field(default=None, description="Per-language candidate discriminator")
    insertion_text: str = Field(
        description="Server insertion text, e.g. 'foo('; informational, insertion parses the label"
    )
    label: str = Field(description="Menu entry shown to the user")
    detail: Optional[str] = Field(default=None, description="'description - package' string")
    documentation: Optional[str] = Field(default=None, description="Raw documentation markup")


@dataclass(frozen=True)
class Span:
    """Document region ``[start, end)`` a completion replaces."""

    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Span start {self.start} is after end {self.end}")

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Placeholder:
    """A numbered cursor stop and its default text."""

    index: int
    default: str


@dataclass
class Template:
    """Snippet synthesized from a flat insertion string.

    Attributes:
        source: The insertion text the template was built from
        text: Snippet body with ``${n:default}`` markers
        placeholders: Stops in traversal order
    """

    source: str
    text: str
    placeholders: list[Placeholder] = field(default_factory=list)

    @property
    def is_literal(self) -> bool:
        """True when synthesis produced no placeholders."""
        return not self.placeholders

    def __str__(self) -> str:
        return self.text


class PresentationAction(Enum):
    """Outcome of presenting a candidate list for a partial token."""

    NO_MATCH = "no_match"  # Nothing starts with the token
    SOLE = "sole"  # The token already is the only candidate
    AMBIGUOUS = "ambiguous"  # List shown, token unchanged
    SCROLLED = "scrolled"  # List already showing, scrolled instead
    COMPLETED = "completed"  # Token extended to the common prefix


@dataclass
class PresentationResult:
    """Result variant returned by the candidate list presenter."""

    action: PresentationAction
    message: str = ""
    completion: Optional[str] = None
    candidates: list[str] = field(default_factory=list)

    @property
    def mutates(self) -> bool:
        """Whether the caller must replace the partial token."""
        return self.action == PresentationAction.COMPLETED


class InsertionOutcome(Enum):
    """Branch taken by the insertion dispatcher."""

    OVERRIDE = "override"  # Stub generation delegated
    HOOK = "hook"  # A custom insertion hook handled it
    TEMPLATE = "template"  # Template expanded
    LITERAL = "literal"  # Raw text inserted
    ATTRIBUTE = "attribute"  # Markup attribute template
    BRACKET = "bracket"  # Closing paren added
    NONE = "none"  # Nothing to do


@dataclass
class CompletionContext:
    """Cursor context sent to the code-intelligence server."""

    category: SyntacticCategory
    offset: int
    prefix: str = ""
    text: str = ""
    file_path: Optional[Path] = None


@dataclass
class CompletionMetrics:
    """Counters for completion requests in one manager."""

    total_requests: int = 0
    completed: int = 0
    ambiguous: int = 0
    scrolled: int = 0
    no_match: int = 0
    sole: int = 0
    insertions: int = 0
    dropped_records: int = 0

    def record(self, action: PresentationAction) -> None:
        """Count one presentation outcome."""
        # Counter fields are named after the action values
        setattr(self, action.value, getattr(self, action.value) + 1)
