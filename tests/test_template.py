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

"""Tests for template synthesis from flat signatures."""

import pytest

from codecomplete.completion.protocol import Placeholder
from codecomplete.completion.template import synthesize_template
from codecomplete.editing import SnippetExpander, StringBuffer


class TestSynthesizeTemplate:
    """Test suite for synthesize_template."""

    def test_method_signature_arguments_become_placeholders(self):
        """Each first-level argument becomes one numbered placeholder."""
        template = synthesize_template("foo(int a, List<String> b)")

        assert template.text == "foo(${1:int a}, ${2:List<String> b})"
        assert template.placeholders == [
            Placeholder(index=1, default="int a"),
            Placeholder(index=2, default="List<String> b"),
        ]
        assert template.source == "foo(int a, List<String> b)"

    def test_type_only_arguments(self):
        """Bare argument types are their own defaults."""
        template = synthesize_template("foo(int, String)")

        assert str(template) == "foo(${1:int}, ${2:String})"

    def test_empty_parens_are_preserved(self):
        """An empty argument list produces no placeholder."""
        template = synthesize_template("size()")

        assert template.text == "size()"
        assert template.is_literal

    def test_generic_type_arguments(self):
        """Angle brackets open placeholders like parentheses."""
        assert synthesize_template("List<String>").text == "List<${1:String}>"
        assert synthesize_template("Map<K, V>").text == "Map<${1:K}, ${2:V}>"

    def test_nested_brackets_are_copied_verbatim(self):
        """Punctuation below the first level stays inside the placeholder."""
        template = synthesize_template("put(Map<K, List<V>> m, int x)")

        assert template.text == "put(${1:Map<K, List<V>> m}, ${2:int x})"
        assert template.placeholders[0].default == "Map<K, List<V>> m"

    def test_nested_empty_call_stays_inside_placeholder(self):
        """Empty parens inside an argument are literal text."""
        assert synthesize_template("submit(task())").text == "submit(${1:task()})"

    def test_spaces_after_openers_and_commas_are_consumed(self):
        """Leading argument whitespace is not part of the default."""
        template = synthesize_template("foo( int a,  int b)")

        assert template.text == "foo(${1:int a}, ${2:int b})"

    def test_numbering_follows_traversal_order(self):
        """Placeholders in consecutive groups keep counting up."""
        template = synthesize_template("foo(a)(b, c)")

        assert template.text == "foo(${1:a})(${2:b}, ${3:c})"
        assert [p.index for p in template.placeholders] == [1, 2, 3]

    def test_snippet_metacharacters_are_escaped(self):
        """Dollar signs in identifiers survive expansion of the template."""
        template = synthesize_template("foo(Outer$1 x, int y)")

        assert template.text == r"foo(${1:Outer\$1 x}, ${2:int y})"
        assert template.placeholders[0].default == "Outer$1 x"

        buffer = StringBuffer()
        expansion = SnippetExpander().expand(buffer, template.text)

        assert buffer.text == "foo(Outer$1 x, int y)"
        assert buffer.text[expansion.stop(1).start : expansion.stop(1).end] == "Outer$1 x"

    def test_braces_and_backslashes_are_escaped(self):
        """Closing braces and backslashes do not end placeholders early."""
        template = synthesize_template("run(Map<K, V> m}, String s\\)")

        buffer = StringBuffer()
        SnippetExpander().expand(buffer, template.text)

        assert buffer.text == "run(Map<K, V> m}, String s\\)"
        assert [p.default for p in template.placeholders] == ["Map<K, V> m}", "String s\\"]

    def test_text_without_brackets_is_literal(self):
        """Plain identifiers come back unchanged."""
        template = synthesize_template("ArrayList")

        assert template.text == "ArrayList"
        assert template.is_literal

    @pytest.mark.parametrize(
        "signature",
        ["a < b", "foo(int a", "x)", "foo(a>", "count > 0"],
    )
    def test_unbalanced_brackets_fall_back_to_literal(self, signature):
        """Unbalanced or mismatched input is kept as it is."""
        template = synthesize_template(signature)

        assert template.text == signature
        assert template.is_literal

    @pytest.mark.parametrize(
        "signature,count",
        [
            ("f()", 0),
            ("f(a)", 1),
            ("f(a, b, c)", 3),
            ("f(Map<A, B> m, C c)", 2),
            ("f(Function<A, B> fn)", 1),
        ],
    )
    def test_placeholder_count_matches_top_level_arguments(self, signature, count):
        """One placeholder per top-level argument."""
        assert len(synthesize_template(signature).placeholders) == count
