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

"""Language profiles for completion rendering.

A profile tells the completion pipeline how to treat one syntactic
category (document kind):

    - which command the code-intelligence server answers for it
    - how to find the start of the text a completion replaces
    - which record fields hold the label, detail and documentation
    - what happens after a candidate is inserted

Usage:
    from codecomplete.languages.profile import DEFAULT_PROFILES, SyntacticCategory

    profile = DEFAULT_PROFILES[SyntacticCategory.JAVA]
    if profile.action == InsertionAction.CODE:
        # Synthesize a template and add imports
        pass
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Tuple


class SyntacticCategory(Enum):
    """Kind of document being edited."""

    JAVA = "java"
    SCALA = "scala"
    GROOVY = "groovy"
    C = "c"
    CPP = "cpp"
    JAVASCRIPT = "javascript"
    RUBY = "ruby"
    PHP = "php"
    PYTHON = "python"
    XML = "xml"


class SpanRule(Enum):
    """How the start of the replaced span is located."""

    CODE = "code"  # Back to the start of the identifier token
    MARKUP = "markup"  # Back to the nearest tag/attribute boundary


class InsertionAction(Enum):
    """Post-insertion behavior for a category."""

    CODE = "code"  # Template expansion, override stubs, imports
    MARKUP = "markup"  # Attribute templates
    DEFAULT = "default"  # Bracket auto-close


@dataclass(frozen=True)
class RecordFields:
    """Names of the fields of a raw server record.

    Attributes:
        insertion: Field holding the text to insert
        label: Field shown as the menu entry (and matched against the prefix)
        detail: Field with the secondary "description - package" string
        documentation: Field with raw documentation markup
        kind: Field with the per-language candidate discriminator
    """

    insertion: str = "completion"
    label: str = "completion"
    detail: str = "menu"
    documentation: str = "info"
    kind: str = "type"


@dataclass(frozen=True)
class LanguageProfile:
    """Read-only completion configuration for one syntactic category."""

    category: SyntacticCategory
    command: str  # Server command answering completion queries
    span_rule: SpanRule = SpanRule.CODE
    action: InsertionAction = InsertionAction.DEFAULT
    fields: RecordFields = field(default_factory=RecordFields)
    angle_generics: bool = False  # `<` opens a type argument list
    extensions: Tuple[str, ...] = ()
    exclude: Tuple[str, ...] = ()  # Labels/details mentioning these are dropped

    @property
    def name(self) -> str:
        return self.category.value

    def with_overrides(self, overrides: Dict[str, Any]) -> LanguageProfile:
        """Return a copy with fields replaced from a config mapping.

        Args:
            overrides: Mapping of profile field names to new values.
                ``fields`` may itself be a mapping of record field names.

        Returns:
            New profile; the receiver is left untouched

        Raises:
            KeyError: If an override names an unknown field
        """
        changes: Dict[str, Any] = {}
        for key, value in overrides.items():
            if key == "fields":
                changes["fields"] = replace(self.fields, **dict(value))
            elif key == "span_rule":
                changes["span_rule"] = SpanRule(value)
            elif key == "action":
                changes["action"] = InsertionAction(value)
            elif key in ("extensions", "exclude"):
                changes[key] = tuple(value)
            elif key in ("command", "angle_generics"):
                changes[key] = value
            else:
                raise KeyError(f"Unknown profile field '{key}' for {self.name}")
        return replace(self, **changes)


_MENU_FIELDS = RecordFields(label="menu", detail="menu")


# ==========================================================================
# Default profile table
# Adding a category means adding a row here, nothing else
# ==========================================================================
DEFAULT_PROFILES: Dict[SyntacticCategory, LanguageProfile] = {
    SyntacticCategory.JAVA: LanguageProfile(
        category=SyntacticCategory.JAVA,
        command="java_complete",
        action=InsertionAction.CODE,
        fields=_MENU_FIELDS,
        angle_generics=True,
        extensions=(".java",),
    ),
    SyntacticCategory.SCALA: LanguageProfile(
        category=SyntacticCategory.SCALA,
        command="scala_complete",
        action=InsertionAction.CODE,
        fields=_MENU_FIELDS,
        extensions=(".scala",),
    ),
    SyntacticCategory.GROOVY: LanguageProfile(
        category=SyntacticCategory.GROOVY,
        command="groovy_complete",
        action=InsertionAction.CODE,
        fields=_MENU_FIELDS,
        angle_generics=True,
        extensions=(".groovy", ".gradle"),
    ),
    SyntacticCategory.C: LanguageProfile(
        category=SyntacticCategory.C,
        command="c_complete",
        extensions=(".c", ".h"),
    ),
    SyntacticCategory.CPP: LanguageProfile(
        category=SyntacticCategory.CPP,
        command="c_complete",
        angle_generics=True,
        extensions=(".cpp", ".cc", ".cxx", ".hpp", ".hh"),
    ),
    SyntacticCategory.JAVASCRIPT: LanguageProfile(
        category=SyntacticCategory.JAVASCRIPT,
        command="javascript_complete",
        extensions=(".js", ".mjs"),
    ),
    SyntacticCategory.RUBY: LanguageProfile(
        category=SyntacticCategory.RUBY,
        command="ruby_complete",
        extensions=(".rb",),
    ),
    SyntacticCategory.PHP: LanguageProfile(
        category=SyntacticCategory.PHP,
        command="php_complete",
        extensions=(".php",),
    ),
    SyntacticCategory.PYTHON: LanguageProfile(
        category=SyntacticCategory.PYTHON,
        command="python_complete",
        extensions=(".py",),
    ),
    SyntacticCategory.XML: LanguageProfile(
        category=SyntacticCategory.XML,
        command="xml_complete",
        span_rule=SpanRule.MARKUP,
        action=InsertionAction.MARKUP,
        extensions=(".xml", ".xsd", ".pom"),
        exclude=("XML Schema", "Namespace"),
    ),
}
