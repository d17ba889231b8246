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

"""Completion manager for orchestrating completion operations.

Provides a high-level API for editor integration following the
Facade pattern: resolve the span, query the server, present the
candidates and run the insertion action for the one chosen.
"""

import logging
from pathlib import Path
from typing import Optional

from codecomplete.completion.dispatcher import InsertionDispatcher
from codecomplete.completion.presenter import (
    CandidateListPresenter,
    ConsoleListSurface,
    filter_candidates,
)
from codecomplete.completion.protocol import (
    CompletionContext,
    CompletionMetrics,
    InsertionOutcome,
    PresentationAction,
    PresentationResult,
    Span,
)
from codecomplete.completion.provider import ServerCompletionProvider
from codecomplete.completion.session import CompletionSession
from codecomplete.completion.span import resolve_span
from codecomplete.config import CompletionSettings
from codecomplete.editing.buffer import TextBuffer
from codecomplete.languages.profile import LanguageProfile
from codecomplete.languages.registry import (
    CategoryRef,
    LanguageRegistry,
    get_language_registry,
)

logger = logging.getLogger(__name__)


class CompletionManager:
    """High-level manager for one editor's completion interactions.

    Holds at most one open ``CompletionSession``. Handles:
    - Category gating through the language registry
    - Candidate filtering and list presentation
    - Insertion dispatch for chosen candidates
    - Metrics collection
    """

    def __init__(
        self,
        provider: ServerCompletionProvider,
        registry: Optional[LanguageRegistry] = None,
        settings: Optional[CompletionSettings] = None,
        presenter: Optional[CandidateListPresenter] = None,
        dispatcher: Optional[InsertionDispatcher] = None,
    ):
        """Initialize the completion manager.

        Args:
            provider: Server-backed candidate provider
            registry: Profile registry (global one, or one built from
                ``settings.profiles_file``, if not provided)
            settings: Completion settings (defaults if not provided)
            presenter: List presenter (console surface if not provided)
            dispatcher: Insertion dispatcher (built from settings if not provided)
        """
        self._settings = settings or CompletionSettings()
        self._provider = provider
        self._registry = registry or self._build_registry(self._settings)
        self._presenter = presenter or CandidateListPresenter(
            ConsoleListSurface(page_size=self._settings.list_page_size),
            case_sensitive=self._settings.case_sensitive,
        )
        self._dispatcher = dispatcher or InsertionDispatcher(
            use_templates=self._settings.use_templates,
            auto_import=self._settings.auto_import,
        )
        self._session: Optional[CompletionSession] = None
        self._metrics = CompletionMetrics()

    @property
    def metrics(self) -> CompletionMetrics:
        """Get completion metrics."""
        return self._metrics

    def reset_metrics(self) -> None:
        """Reset all metrics."""
        self._metrics = CompletionMetrics()

    @property
    def session(self) -> Optional[CompletionSession]:
        """The open session, if any."""
        return self._session

    @property
    def dispatcher(self) -> InsertionDispatcher:
        return self._dispatcher

    def supports(self, category: CategoryRef) -> bool:
        """Whether completion is available for a category."""
        return self._registry.has(category)

    def complete(
        self,
        buffer: TextBuffer,
        category: CategoryRef,
        file_path: Optional[Path] = None,
    ) -> PresentationResult:
        """Complete the token before the cursor.

        Invoked again while the candidate list for the same span is
        showing, scrolls the list instead of querying the server.

        Args:
            buffer: Document being edited
            category: Syntactic category of the document
            file_path: Path of the document, passed to the server

        Returns:
            What happened; on COMPLETED the buffer holds the completion

        Raises:
            KeyError: If the category has no profile
        """
        profile = self._registry.get(category)
        span = resolve_span(buffer, profile)
        partial = buffer.text[span.start : span.end]
        self._metrics.total_requests += 1

        if self._can_scroll(span):
            result = self._presenter.present(self._session.labels, partial)
            self._metrics.record(result.action)
            return result

        self.abort()
        context = CompletionContext(
            category=profile.category,
            offset=span.end,
            prefix=partial,
            text=buffer.text,
            file_path=file_path,
        )
        dropped_before = self._provider.dropped
        candidates = filter_candidates(self._provider.provide(profile, context), profile)
        self._metrics.dropped_records += self._provider.dropped - dropped_before
        self._session = CompletionSession(profile, span, candidates)

        result = self._presenter.present(self._session.labels, partial)
        self._metrics.record(result.action)

        if result.action == PresentationAction.COMPLETED:
            chosen = self._replace(buffer, span.start, result.completion)
            # Longer candidates stay reachable until the match is unique
            if len(result.candidates) == 1 and self._session.lookup(result.completion):
                self._insert(buffer, result.completion, chosen, profile)
        elif result.action in (PresentationAction.NO_MATCH, PresentationAction.SOLE):
            self.abort()

        logger.debug(f"complete({profile.name}, {partial!r}) -> {result.action.value}")
        return result

    def select(self, buffer: TextBuffer, label: str) -> InsertionOutcome:
        """Insert a candidate picked from the shown list.

        Args:
            buffer: Document being edited
            label: Label of the chosen candidate

        Returns:
            The insertion branch that ran

        Raises:
            RuntimeError: If no session is open
            KeyError: If the label is not a candidate of the session
        """
        if self._session is None:
            raise RuntimeError("No active completion session")
        if self._session.lookup(label) is None:
            raise KeyError(f"Unknown completion candidate: {label!r}")

        profile = self._session.profile
        chosen = self._replace(buffer, self._session.span.start, label)
        return self._insert(buffer, label, chosen, profile)

    def describe(self, label: str) -> str:
        """Rendered documentation for a candidate of the open session."""
        if self._session is None:
            return ""
        return self._presenter.describe(label, self._session, self._settings.doc_wrap_width)

    def abort(self) -> None:
        """Drop the open session and hide the candidate list."""
        if self._session is not None:
            self._session.close()
            self._session = None
        self._presenter.close()

    def _insert(
        self, buffer: TextBuffer, label: str, span: Span, profile: LanguageProfile
    ) -> InsertionOutcome:
        candidate = self._session.lookup(label)
        self.abort()

        outcome = self._dispatcher.dispatch(buffer, candidate, span, profile)
        self._metrics.insertions += 1
        return outcome

    def _replace(self, buffer: TextBuffer, start: int, text: str) -> Span:
        buffer.delete(start, buffer.cursor)
        buffer.goto(start)
        buffer.insert(text)
        return Span(start=start, end=start + len(text))

    def _can_scroll(self, span: Span) -> bool:
        return (
            self._session is not None
            and self._session.span == span
            and self._presenter.surface.is_showing
        )

    @staticmethod
    def _build_registry(settings: CompletionSettings) -> LanguageRegistry:
        if settings.profiles_file is None:
            return get_language_registry()
        registry = LanguageRegistry()
        registry.load_from_yaml(settings.profiles_file)
        return registry
