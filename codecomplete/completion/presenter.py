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

"""Candidate list presentation.

Implements the "complete, show the list, or scroll it" step: extend the
partial token to the longest common prefix when that adds something,
otherwise show the matching labels on a list surface.
"""

import logging
from os.path import commonprefix
from typing import Iterable, Optional, Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from codecomplete.completion.protocol import (
    Candidate,
    PresentationAction,
    PresentationResult,
)
from codecomplete.completion.session import CompletionSession
from codecomplete.languages.profile import LanguageProfile

logger = logging.getLogger(__name__)

NO_COMPLETIONS = "No completions"
ONLY_COMPLETION = "That is the only possible completion"


@runtime_checkable
class ListSurface(Protocol):
    """Read-only surface that displays a candidate list."""

    @property
    def is_showing(self) -> bool:
        """Whether the list is currently displayed."""
        ...

    def show(self, labels: list[str]) -> None:
        """Display a fresh list."""
        ...

    def scroll(self) -> None:
        """Scroll the displayed list by one page."""
        ...

    def close(self) -> None:
        """Hide the list."""
        ...


class ConsoleListSurface:
    """List surface that pages labels onto a rich console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        page_size: int = 20,
        title: str = "Completions",
    ):
        """Initialize the surface.

        Args:
            console: Rich console for output
            page_size: Labels per page
            title: Table title
        """
        self.console = console or Console()
        self.page_size = page_size
        self.title = title
        self._labels: list[str] = []
        self._offset = 0
        self._showing = False

    @property
    def is_showing(self) -> bool:
        return self._showing

    @property
    def offset(self) -> int:
        return self._offset

    def show(self, labels: list[str]) -> None:
        self._labels = list(labels)
        self._offset = 0
        self._showing = True
        self._render()

    def scroll(self) -> None:
        if not self._showing:
            return
        self._offset += self.page_size
        if self._offset >= len(self._labels):
            self._offset = 0  # Wrap back to the top
        self._render()

    def close(self) -> None:
        self._showing = False
        self._labels = []
        self._offset = 0

    def _render(self) -> None:
        page = self._labels[self._offset : self._offset + self.page_size]
        last = self._offset + len(page)

        table = Table(title=self.title, show_header=False, box=None)
        table.add_column("candidate", style="cyan", no_wrap=True)
        for label in page:
            table.add_row(escape(label))
        table.caption = f"{self._offset + 1}-{last} of {len(self._labels)}"
        self.console.print(table)


class CandidateListPresenter:
    """Decides between completing, listing and scrolling."""

    def __init__(self, surface: Optional[ListSurface] = None, case_sensitive: bool = True):
        """Initialize the presenter.

        Args:
            surface: Where ambiguous candidate lists are shown
            case_sensitive: Whether prefix matching respects case
        """
        self.surface = surface or ConsoleListSurface()
        self.case_sensitive = case_sensitive
        self._shown: Optional[list[str]] = None

    def present(self, labels: Iterable[str], partial: str) -> PresentationResult:
        """Present candidates for a partial token.

        Args:
            labels: Display strings of the candidates
            partial: Text between span start and cursor

        Returns:
            Result variant; only COMPLETED asks the caller to mutate
        """
        matches = sorted({label for label in labels if self._starts_with(label, partial)})

        if not matches:
            self.close()
            return PresentationResult(PresentationAction.NO_MATCH, NO_COMPLETIONS)

        if len(matches) == 1 and matches[0] == partial:
            self.close()
            return PresentationResult(PresentationAction.SOLE, ONLY_COMPLETION, candidates=matches)

        completion = self._common_prefix(matches)
        if self._fold(completion) == self._fold(partial):
            if self.surface.is_showing and self._shown == matches:
                self.surface.scroll()
                return PresentationResult(PresentationAction.SCROLLED, candidates=matches)

            self.surface.show(matches)
            self._shown = matches
            logger.debug(f"Showing {len(matches)} candidates for {partial!r}")
            return PresentationResult(PresentationAction.AMBIGUOUS, candidates=matches)

        self.close()
        logger.debug(f"Completed {partial!r} to {completion!r}")
        return PresentationResult(
            PresentationAction.COMPLETED, completion=completion, candidates=matches
        )

    def describe(self, label: str, session: CompletionSession, width: Optional[int] = None) -> str:
        """Rendered documentation for a listed label."""
        return session.documentation(label, width)

    def close(self) -> None:
        """Close the list surface if it is showing."""
        if self.surface.is_showing:
            self.surface.close()
        self._shown = None

    def _starts_with(self, label: str, partial: str) -> bool:
        return self._fold(label).startswith(self._fold(partial))

    def _common_prefix(self, matches: list[str]) -> str:
        length = len(commonprefix([self._fold(m) for m in matches]))
        return matches[0][:length]

    def _fold(self, text: str) -> str:
        return text if self.case_sensitive else text.lower()


def filter_candidates(candidates: Iterable[Candidate], profile: LanguageProfile) -> list[Candidate]:
    """Drop candidates whose label or detail carries an excluded marker.

    Args:
        candidates: Candidates from the server
        profile: Profile with the exclusion markers

    Returns:
        Remaining candidates, order preserved
    """
    if not profile.exclude:
        return list(candidates)

    kept = []
    for candidate in candidates:
        text = f"{candidate.label} {candidate.detail or ''}"
        if any(marker in text for marker in profile.exclude):
            continue
        kept.append(candidate)
    return kept
