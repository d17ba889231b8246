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

"""Tests for the server-backed candidate provider."""

from codecomplete.completion.protocol import CompletionContext
from codecomplete.completion.provider import CompletionServer, ServerCompletionProvider
from codecomplete.languages import SyntacticCategory


def context(category=SyntacticCategory.JAVA):
    return CompletionContext(category=category, offset=0)


class TestServerCompletionProvider:
    """Test suite for ServerCompletionProvider."""

    def test_fake_server_satisfies_protocol(self, make_server):
        """Anything with complete() is a server."""
        assert isinstance(make_server(), CompletionServer)

    def test_records_use_profile_fields(self, make_server, java_profile):
        """Java records take their label from the menu field."""
        server = make_server(
            {
                "java_complete": [
                    {
                        "completion": "add(",
                        "menu": "add(E e) : boolean - List",
                        "info": "<p>Appends.</p>",
                        "type": "f",
                    }
                ]
            }
        )

        [candidate] = ServerCompletionProvider(server).provide(java_profile, context())

        assert candidate.insertion_text == "add("
        assert candidate.label == "add(E e) : boolean - List"
        assert candidate.detail == "add(E e) : boolean - List"
        assert candidate.documentation == "<p>Appends.</p>"
        assert candidate.kind == "f"
        assert server.calls[0][0] == "java_complete"

    def test_mapping_response(self, make_server, c_profile):
        """Records may be wrapped in a 'completions' mapping."""
        server = make_server({"c_complete": {"completions": [{"completion": "printf("}]}})

        [candidate] = ServerCompletionProvider(server).provide(c_profile, context(SyntacticCategory.C))

        assert candidate.label == "printf("
        assert candidate.insertion_text == "printf("

    def test_label_and_insertion_fall_back_to_each_other(self, make_server, java_profile):
        """A record with only one of label or insertion text still counts."""
        server = make_server({"java_complete": [{"completion": "size()"}, {"menu": "length()"}]})

        candidates = ServerCompletionProvider(server).provide(java_profile, context())

        assert [(c.label, c.insertion_text) for c in candidates] == [
            ("size()", "size()"),
            ("length()", "length()"),
        ]

    def test_unusable_records_are_dropped(self, make_server, c_profile):
        """Records without text or of the wrong shape are counted and skipped."""
        server = make_server({"c_complete": [{"type": "f"}, "printf", {"completion": ""}, {"completion": "puts"}]})
        provider = ServerCompletionProvider(server)

        candidates = provider.provide(c_profile, context(SyntacticCategory.C))

        assert [c.label for c in candidates] == ["puts"]
        assert provider.dropped == 3

    def test_documentation_object(self, make_server, c_profile):
        """Documentation objects contribute their value text."""
        server = make_server(
            {"c_complete": [{"completion": "puts", "info": {"kind": "markdown", "value": "Writes."}}]}
        )

        [candidate] = ServerCompletionProvider(server).provide(c_profile, context(SyntacticCategory.C))

        assert candidate.documentation == "Writes."

    def test_empty_response(self, make_server, c_profile):
        """No reply means no candidates."""
        provider = ServerCompletionProvider(make_server({"c_complete": None}))

        assert provider.provide(c_profile, context(SyntacticCategory.C)) == []
