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

"""Post-insertion behavior for chosen candidates.

Once the chosen label sits in the buffer over the resolved span, the
dispatcher replaces it with what the candidate really means for the
document's category:

- code: override stubs, custom insertion hooks, placeholder templates
  and import requests
- markup: ``name="value"`` attribute templates
- default: auto-closing an opened parenthesis

Each call runs exactly one branch. Collaborator failures propagate.
"""

import logging
import re
from typing import Iterable, Optional, Protocol, runtime_checkable

from codecomplete.completion.candidate import (
    LabelParts,
    import_target,
    parse_label,
    parse_override,
)
from codecomplete.completion.protocol import Candidate, InsertionOutcome, Span
from codecomplete.completion.template import synthesize_template
from codecomplete.editing.buffer import TextBuffer
from codecomplete.editing.snippet import SnippetExpander, TemplateEngine, escape_snippet
from codecomplete.languages.profile import InsertionAction, LanguageProfile

logger = logging.getLogger(__name__)

_ATTRIBUTE = re.compile(r'(.*)="(.*)"')
_WHITESPACE = frozenset(" \t\r\n")

BRACKET_TEMPLATE = "$1)$0"


@runtime_checkable
class CodeGenerator(Protocol):
    """Generates override-method stubs in the current document."""

    def generate_override_stub(self, method_name: str) -> None:
        ...


@runtime_checkable
class ImportManager(Protocol):
    """Adds imports to the current document."""

    def add_import(self, qualified_name: str) -> None:
        ...


@runtime_checkable
class InsertionHook(Protocol):
    """Custom insertion strategy tried before template expansion.

    ``try_insert`` is called with the span already deleted and the
    cursor at its start. Returning True means the hook inserted the
    candidate and no other strategy runs.
    """

    @property
    def name(self) -> str:
        ...

    def try_insert(self, buffer: TextBuffer, candidate: Candidate, parts: LabelParts) -> bool:
        ...


class InsertionDispatcher:
    """Runs the post-insertion action for a chosen candidate."""

    def __init__(
        self,
        code_generator: Optional[CodeGenerator] = None,
        import_manager: Optional[ImportManager] = None,
        template_engine: Optional[TemplateEngine] = None,
        hooks: Optional[Iterable[InsertionHook]] = None,
        use_templates: bool = True,
        auto_import: bool = True,
    ):
        """Initialize the dispatcher.

        Args:
            code_generator: Collaborator for override stubs
            import_manager: Collaborator for import requests
            template_engine: Snippet engine (SnippetExpander by default)
            hooks: Insertion hooks, tried in the given order
            use_templates: Expand templates instead of inserting raw text
            auto_import: Request imports for package hints
        """
        self.code_generator = code_generator
        self.import_manager = import_manager
        self.template_engine = template_engine or SnippetExpander()
        self.use_templates = use_templates
        self.auto_import = auto_import
        self._hooks: list[InsertionHook] = list(hooks or [])

    @property
    def hooks(self) -> list[InsertionHook]:
        """Insertion hooks in the order they are tried."""
        return list(self._hooks)

    def add_hook(self, hook: InsertionHook, index: Optional[int] = None) -> None:
        """Add a hook at the end, or at ``index``."""
        if index is None:
            self._hooks.append(hook)
        else:
            self._hooks.insert(index, hook)

    def remove_hook(self, name: str) -> bool:
        """Remove a hook by name."""
        for i, hook in enumerate(self._hooks):
            if hook.name == name:
                del self._hooks[i]
                return True
        return False

    @property
    def templates_active(self) -> bool:
        return self.use_templates and self.template_engine is not None

    def dispatch(
        self,
        buffer: TextBuffer,
        candidate: Candidate,
        span: Span,
        profile: LanguageProfile,
    ) -> InsertionOutcome:
        """Run the post-insertion action for a candidate.

        Args:
            buffer: Document holding the chosen label over ``span``
            candidate: The chosen candidate
            span: Region holding the chosen text; cursor at its end
            profile: Profile of the document's category

        Returns:
            The branch that ran
        """
        if profile.action == InsertionAction.CODE:
            outcome = self._insert_code(buffer, candidate, span)
        elif profile.action == InsertionAction.MARKUP:
            outcome = self._insert_attribute(buffer, candidate, span)
        else:
            outcome = self._close_bracket(buffer)

        logger.debug(f"Dispatched {candidate.label!r} for {profile.name}: {outcome.value}")
        return outcome

    def _insert_code(self, buffer: TextBuffer, candidate: Candidate, span: Span) -> InsertionOutcome:
        method_name = parse_override(candidate.label)
        if method_name is not None:
            if self.code_generator is not None:
                _clear(buffer, span)
                self.code_generator.generate_override_stub(method_name)
                return InsertionOutcome.OVERRIDE
            logger.warning(f"No code generator for override of {method_name}; inserting text")

        parts = parse_label(candidate.label)
        _clear(buffer, span)

        outcome = self._run_hooks(buffer, candidate, parts)
        if outcome is None:
            template = synthesize_template(parts.insertion)
            if self.templates_active and not template.is_literal:
                self.template_engine.expand(buffer, template.text)
                outcome = InsertionOutcome.TEMPLATE
            else:
                buffer.insert(parts.insertion)
                outcome = InsertionOutcome.LITERAL

        target = import_target(parts)
        if target and self.auto_import:
            if self.import_manager is None:
                logger.debug(f"No import manager; skipping import of {target}")
            else:
                self.import_manager.add_import(target)
        return outcome

    def _run_hooks(
        self, buffer: TextBuffer, candidate: Candidate, parts: LabelParts
    ) -> Optional[InsertionOutcome]:
        for hook in self._hooks:
            if hook.try_insert(buffer, candidate, parts):
                logger.debug(f"Insertion hook {hook.name} handled {candidate.label!r}")
                return InsertionOutcome.HOOK
        return None

    def _insert_attribute(
        self, buffer: TextBuffer, candidate: Candidate, span: Span
    ) -> InsertionOutcome:
        # Only attribute positions: a tag name directly follows "<"
        before = buffer.char_before(span.start)
        if before is None or before not in _WHITESPACE:
            return InsertionOutcome.NONE

        text = candidate.label
        if not text.endswith('"'):
            text += '=""'
        match = _ATTRIBUTE.fullmatch(text)
        if not match:
            return InsertionOutcome.NONE

        _clear(buffer, span)
        if self.templates_active:
            name, value = match.groups()
            body = f'{escape_snippet(name)}="${{1:{escape_snippet(value)}}}" $0'
            self.template_engine.expand(buffer, body)
        else:
            buffer.insert(text)
        return InsertionOutcome.ATTRIBUTE

    def _close_bracket(self, buffer: TextBuffer) -> InsertionOutcome:
        cursor = buffer.cursor
        if buffer.char_before(cursor) != "(" or buffer.char_at(cursor) == ")":
            return InsertionOutcome.NONE

        if self.templates_active:
            self.template_engine.expand(buffer, BRACKET_TEMPLATE)
        else:
            buffer.insert(")")
            buffer.goto(cursor)
        return InsertionOutcome.BRACKET


def _clear(buffer: TextBuffer, span: Span) -> None:
    buffer.delete(span.start, span.end)
    buffer.goto(span.start)
