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

"""Completion rendering for editor integration.

Turns the candidates a code-intelligence server returns into text in
the document:
- Span resolution per syntactic category
- Candidate list presentation (complete, list or scroll)
- Placeholder templates synthesized from signatures
- Post-insertion actions (imports, override stubs, attribute templates)

Example usage:
    from codecomplete.completion import (
        CompletionManager,
        PresentationAction,
        ServerCompletionProvider,
    )
    from codecomplete.editing import StringBuffer

    manager = CompletionManager(ServerCompletionProvider(server))
    buffer = StringBuffer.from_marked("list.ad|")

    result = manager.complete(buffer, "java")
    if result.action == PresentationAction.AMBIGUOUS:
        manager.select(buffer, result.candidates[0])
"""

from codecomplete.completion.candidate import (
    LabelParts,
    base_name,
    candidate_detail,
    candidate_documentation,
    candidate_type,
    import_target,
    package_of,
    parse_label,
    parse_override,
)
from codecomplete.completion.dispatcher import (
    CodeGenerator,
    ImportManager,
    InsertionDispatcher,
    InsertionHook,
)
from codecomplete.completion.documentation import render_documentation
from codecomplete.completion.manager import CompletionManager
from codecomplete.completion.presenter import (
    CandidateListPresenter,
    ConsoleListSurface,
    ListSurface,
    filter_candidates,
)
from codecomplete.completion.protocol import (
    Candidate,
    CompletionContext,
    CompletionMetrics,
    InsertionOutcome,
    Placeholder,
    PresentationAction,
    PresentationResult,
    Span,
    Template,
)
from codecomplete.completion.provider import CompletionServer, ServerCompletionProvider
from codecomplete.completion.session import CompletionSession
from codecomplete.completion.span import resolve_span
from codecomplete.completion.template import synthesize_template

__all__ = [
    # Protocol types
    "Candidate",
    "CompletionContext",
    "CompletionMetrics",
    "InsertionOutcome",
    "Placeholder",
    "PresentationAction",
    "PresentationResult",
    "Span",
    "Template",
    # Candidate model
    "LabelParts",
    "base_name",
    "candidate_detail",
    "candidate_documentation",
    "candidate_type",
    "import_target",
    "package_of",
    "parse_label",
    "parse_override",
    # Pipeline stages
    "render_documentation",
    "resolve_span",
    "synthesize_template",
    "CandidateListPresenter",
    "ConsoleListSurface",
    "ListSurface",
    "filter_candidates",
    "CompletionSession",
    "CodeGenerator",
    "ImportManager",
    "InsertionDispatcher",
    "InsertionHook",
    # Server and manager
    "CompletionServer",
    "ServerCompletionProvider",
    "CompletionManager",
]
