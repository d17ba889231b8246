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

"""Tests for language profiles and the profile registry."""

from dataclasses import replace
from pathlib import Path

import pytest

from codecomplete.languages import (
    DEFAULT_PROFILES,
    InsertionAction,
    LanguageRegistry,
    SpanRule,
    SyntacticCategory,
    get_language_registry,
    reset_language_registry,
)


class TestDefaultProfiles:
    """Tests for the built-in profile table."""

    def test_every_category_has_a_profile(self):
        """Each syntactic category is covered."""
        assert set(DEFAULT_PROFILES) == set(SyntacticCategory)

    @pytest.mark.parametrize(
        "category,action",
        [
            (SyntacticCategory.JAVA, InsertionAction.CODE),
            (SyntacticCategory.SCALA, InsertionAction.CODE),
            (SyntacticCategory.GROOVY, InsertionAction.CODE),
            (SyntacticCategory.C, InsertionAction.DEFAULT),
            (SyntacticCategory.PYTHON, InsertionAction.DEFAULT),
            (SyntacticCategory.XML, InsertionAction.MARKUP),
        ],
    )
    def test_insertion_actions(self, category, action):
        """Categories map to their post-insertion behavior."""
        assert DEFAULT_PROFILES[category].action == action

    def test_code_categories_label_with_menu(self):
        """JVM categories show the menu field as the label."""
        assert DEFAULT_PROFILES[SyntacticCategory.JAVA].fields.label == "menu"
        assert DEFAULT_PROFILES[SyntacticCategory.C].fields.label == "completion"

    def test_c_family_shares_command(self):
        """C and C++ are answered by the same server command."""
        assert DEFAULT_PROFILES[SyntacticCategory.C].command == "c_complete"
        assert DEFAULT_PROFILES[SyntacticCategory.CPP].command == "c_complete"

    def test_xml_profile(self, xml_profile):
        """Markup uses its own span rule and exclusion markers."""
        assert xml_profile.span_rule == SpanRule.MARKUP
        assert xml_profile.exclude == ("XML Schema", "Namespace")


class TestProfileOverrides:
    """Tests for LanguageProfile.with_overrides."""

    def test_values_are_converted(self, java_profile):
        """Enum and tuple fields are converted from plain config values."""
        profile = java_profile.with_overrides(
            {"span_rule": "markup", "action": "default", "exclude": ["Deprecated"]}
        )

        assert profile.span_rule == SpanRule.MARKUP
        assert profile.action == InsertionAction.DEFAULT
        assert profile.exclude == ("Deprecated",)
        assert java_profile.span_rule == SpanRule.CODE

    def test_record_fields(self, java_profile):
        """Record field names can be partially overridden."""
        profile = java_profile.with_overrides({"fields": {"documentation": "doc"}})

        assert profile.fields.documentation == "doc"
        assert profile.fields.label == "menu"

    def test_unknown_field(self, java_profile):
        """Unknown keys are rejected."""
        with pytest.raises(KeyError):
            java_profile.with_overrides({"colour": "blue"})


class TestLanguageRegistry:
    """Test suite for LanguageRegistry."""

    @pytest.fixture
    def registry(self):
        return LanguageRegistry()

    def test_lookup_by_enum_or_name(self, registry):
        """Categories resolve from enum members and names."""
        java = registry.get(SyntacticCategory.JAVA)

        assert registry.get("java") is java
        assert registry.get("JAVA") is java
        assert java.command == "java_complete"

    def test_unknown_category(self, registry):
        """Unsupported categories fail with the available names."""
        with pytest.raises(KeyError, match="Available: c, cpp"):
            registry.get("cobol")
        assert not registry.has("cobol")

    def test_detect_category(self, registry):
        """File extensions map to categories."""
        assert registry.detect_category(Path("src/Foo.java")) == SyntacticCategory.JAVA
        assert registry.detect_category(Path("pom.XML")) == SyntacticCategory.XML
        assert registry.detect_category(Path("notes.txt")) is None

    def test_register_replaces_extensions(self, registry, java_profile):
        """Re-registering a category drops its old extensions."""
        registry.register(replace(java_profile, extensions=("jav",)))

        assert registry.detect_category(Path("Foo.java")) is None
        assert registry.detect_category(Path("Foo.jav")) == SyntacticCategory.JAVA

    def test_unregister(self, registry):
        """Unregistered categories are no longer supported."""
        registry.unregister("xml")

        assert not registry.has(SyntacticCategory.XML)
        assert registry.detect_category(Path("pom.xml")) is None
        assert "xml" not in registry.list_categories()

    def test_custom_profile_table(self, java_profile):
        """A registry can start from an explicit table."""
        registry = LanguageRegistry({SyntacticCategory.JAVA: java_profile})

        assert registry.list_categories() == ["java"]

    def test_load_from_yaml(self, registry, tmp_path):
        """YAML files override profile fields."""
        path = tmp_path / "profiles.yaml"
        path.write_text(
            "profiles:\n"
            "  java:\n"
            "    command: jdt_complete\n"
            "    exclude: [Deprecated]\n"
            "    fields:\n"
            "      label: completion\n"
        )

        assert registry.load_from_yaml(path) == 1

        java = registry.get("java")
        assert java.command == "jdt_complete"
        assert java.exclude == ("Deprecated",)
        assert java.fields.label == "completion"
        assert registry.detect_category(Path("Foo.java")) == SyntacticCategory.JAVA

    def test_load_from_yaml_unknown_category(self, registry, tmp_path):
        """Overrides for unknown categories are rejected."""
        path = tmp_path / "profiles.yaml"
        path.write_text("profiles:\n  cobol:\n    command: x\n")

        with pytest.raises(KeyError):
            registry.load_from_yaml(path)

    def test_load_from_empty_yaml(self, registry, tmp_path):
        """An empty file changes nothing."""
        path = tmp_path / "profiles.yaml"
        path.write_text("")

        assert registry.load_from_yaml(path) == 0


class TestGlobalRegistry:
    """Tests for the global registry accessors."""

    def test_singleton(self):
        """The same registry is returned until reset."""
        registry = get_language_registry()

        assert get_language_registry() is registry
        reset_language_registry()
        assert get_language_registry() is not registry
