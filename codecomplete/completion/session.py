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

"""Completion session state.

A session lives from one server query to the insertion (or abort) that
ends it. It owns the label -> candidate table used to look up
documentation and to turn a chosen label back into its candidate.
"""

import logging
from typing import Iterable, Optional

from codecomplete.completion.documentation import render_documentation
from codecomplete.completion.protocol import Candidate, Span
from codecomplete.languages.profile import LanguageProfile

logger = logging.getLogger(__name__)


class CompletionSession:
    """Per-query candidate table.

    Written once on construction and read-only afterwards.
    """

    def __init__(self, profile: LanguageProfile, span: Span, candidates: Iterable[Candidate]):
        """Initialize the session.

        Args:
            profile: Profile of the document being completed
            span: Span resolved for the query
            candidates: Candidates returned by the server
        """
        self._profile = profile
        self._span = span
        self._by_label: dict[str, Candidate] = {}
        self._closed = False

        for candidate in candidates:
            if candidate.label in self._by_label:
                logger.debug(f"Duplicate candidate label ignored: {candidate.label!r}")
                continue
            self._by_label[candidate.label] = candidate

    @property
    def profile(self) -> LanguageProfile:
        return self._profile

    @property
    def span(self) -> Span:
        return self._span

    @property
    def labels(self) -> list[str]:
        """Labels in server order."""
        return list(self._by_label)

    @property
    def closed(self) -> bool:
        return self._closed

    def lookup(self, label: str) -> Optional[Candidate]:
        """Get the candidate shown under a label."""
        if self._closed:
            return None
        return self._by_label.get(label)

    def documentation(self, label: str, width: Optional[int] = None) -> str:
        """Rendered documentation for a label ("" when there is none)."""
        candidate = self.lookup(label)
        if candidate is None:
            return ""
        return render_documentation(candidate.documentation, width)

    def close(self) -> None:
        """End the session and drop the candidate table."""
        self._by_label.clear()
        self._closed = True

    def __len__(self) -> int:
        return len(self._by_label)

    def __repr__(self) -> str:
        return (
            f"CompletionSession(category={self._profile.name!r}, "
            f"candidates={len(self)}, closed={self._closed})"
        )
