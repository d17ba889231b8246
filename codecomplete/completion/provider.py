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

"""Server-backed candidate provider.

Queries the code-intelligence server with the profile's command and
normalizes its per-language records into ``Candidate`` objects.
"""

import logging
from typing import Any, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

from codecomplete.completion.protocol import Candidate, CompletionContext
from codecomplete.languages.profile import LanguageProfile, RecordFields

logger = logging.getLogger(__name__)

ServerResponse = Union[Sequence[Mapping[str, Any]], Mapping[str, Any], None]


@runtime_checkable
class CompletionServer(Protocol):
    """Synchronous query interface of the code-intelligence server."""

    def complete(self, command: str, context: CompletionContext) -> ServerResponse:
        """Return raw completion records for the cursor context.

        Either a list of records or a mapping holding them under
        ``"completions"``.
        """
        ...


class ServerCompletionProvider:
    """Turns server records into candidates using the profile's field map."""

    def __init__(self, server: CompletionServer):
        """Initialize the provider.

        Args:
            server: Code-intelligence server client
        """
        self._server = server
        self.dropped = 0

    @property
    def name(self) -> str:
        return "server"

    def provide(self, profile: LanguageProfile, context: CompletionContext) -> list[Candidate]:
        """Query the server and normalize the reply.

        Args:
            profile: Profile naming the command and record fields
            context: Cursor context for the query

        Returns:
            Candidates in server order; unusable records are dropped
        """
        response = self._server.complete(profile.command, context)

        if response is None:
            records: Sequence[Any] = []
        elif isinstance(response, Mapping):
            records = response.get("completions") or []
        else:
            records = response

        candidates = []
        for record in records:
            candidate = self.normalize(record, profile.fields)
            if candidate is None:
                self.dropped += 1
                continue
            candidates.append(candidate)

        logger.debug(f"{profile.command} returned {len(candidates)} candidates")
        return candidates

    def normalize(self, record: Any, fields: RecordFields) -> Optional[Candidate]:
        """Convert one raw record.

        Args:
            record: Raw server record
            fields: Field names for this category

        Returns:
            Candidate, or None when the record has neither label nor insertion text
        """
        if not isinstance(record, Mapping):
            logger.warning(f"Dropping malformed completion record: {record!r}")
            return None

        insertion = _text(record.get(fields.insertion))
        label = _text(record.get(fields.label)) or insertion
        if not label:
            logger.warning(f"Dropping completion record without label: {record!r}")
            return None

        return Candidate(
            kind=_text(record.get(fields.kind)),
            insertion_text=insertion or label,
            label=label,
            detail=_text(record.get(fields.detail)),
            documentation=_documentation(record.get(fields.documentation)),
        )


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def _documentation(value: Any) -> Optional[str]:
    # Markup content objects carry the text under "value"
    if isinstance(value, Mapping):
        return _text(value.get("value"))
    return _text(value)
