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

"""Language profile registry.

Central lookup from syntactic category (or file path) to the
completion profile for it. Lookup of an unknown category fails
loudly so callers gate completion on supported documents.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from codecomplete.languages.profile import (
    DEFAULT_PROFILES,
    LanguageProfile,
    SyntacticCategory,
)

logger = logging.getLogger(__name__)

CategoryRef = Union[SyntacticCategory, str]


class LanguageRegistry:
    """Registry for language profiles.

    Provides:
    - Profile registration by category
    - Category detection from file paths
    - Profile overrides from YAML files
    """

    def __init__(self, profiles: Optional[Dict[SyntacticCategory, LanguageProfile]] = None):
        """Initialize the registry.

        Args:
            profiles: Initial profiles (defaults to the built-in table)
        """
        self._profiles: Dict[SyntacticCategory, LanguageProfile] = {}
        self._extension_map: Dict[str, SyntacticCategory] = {}  # .java -> JAVA

        for profile in (profiles if profiles is not None else DEFAULT_PROFILES).values():
            self.register(profile)

    def register(self, profile: LanguageProfile) -> None:
        """Register (or replace) a profile.

        Args:
            profile: The profile to register
        """
        if profile.category in self._profiles:
            logger.debug(f"Replacing language profile: {profile.name}")
            self._drop_extensions(profile.category)
        self._profiles[profile.category] = profile

        for ext in profile.extensions:
            ext = ext.lower()
            if not ext.startswith("."):
                ext = "." + ext
            if ext in self._extension_map and self._extension_map[ext] != profile.category:
                logger.warning(
                    f"Extension {ext} moved from {self._extension_map[ext].value} to {profile.name}"
                )
            self._extension_map[ext] = profile.category

    def unregister(self, category: CategoryRef) -> None:
        """Unregister a profile.

        Args:
            category: Category to remove
        """
        resolved = self._resolve(category)
        self._drop_extensions(resolved)
        del self._profiles[resolved]
        logger.info(f"Unregistered language profile: {resolved.value}")

    def get(self, category: CategoryRef) -> LanguageProfile:
        """Get the profile for a category.

        Args:
            category: Category enum member or its name

        Returns:
            The registered profile

        Raises:
            KeyError: If the category has no profile
        """
        return self._profiles[self._resolve(category)]

    def has(self, category: CategoryRef) -> bool:
        """Check if a category has a profile."""
        try:
            self._resolve(category)
            return True
        except KeyError:
            return False

    def detect_category(self, path: Path) -> Optional[SyntacticCategory]:
        """Detect the category of a file from its extension.

        Args:
            path: File path to check

        Returns:
            Category or None if no profile claims the extension
        """
        return self._extension_map.get(path.suffix.lower())

    def list_categories(self) -> List[str]:
        """List registered category names, sorted."""
        return sorted(c.value for c in self._profiles)

    def load_from_yaml(self, path: Path) -> int:
        """Apply profile overrides from a YAML file.

        Example:
        ```yaml
        profiles:
          java:
            command: java_complete
            exclude: ["Deprecated"]
          scala:
            angle_generics: true
        ```

        Args:
            path: Path to the YAML file

        Returns:
            Number of profiles updated

        Raises:
            KeyError: If the file names an unknown category or profile field
        """
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        overrides = data.get("profiles", {}) or {}
        for name, values in overrides.items():
            profile = self.get(name)
            self.register(profile.with_overrides(values or {}))

        logger.info(f"Loaded {len(overrides)} profile overrides from {path}")
        return len(overrides)

    def _resolve(self, category: CategoryRef) -> SyntacticCategory:
        """Resolve a category reference to a registered category."""
        resolved: Optional[SyntacticCategory]
        if isinstance(category, SyntacticCategory):
            resolved = category
        else:
            try:
                resolved = SyntacticCategory(category.lower())
            except ValueError:
                resolved = None

        if resolved is None or resolved not in self._profiles:
            name = getattr(category, "value", category)
            available = ", ".join(self.list_categories())
            raise KeyError(f"No completion profile for '{name}'. Available: {available}")
        return resolved

    def _drop_extensions(self, category: SyntacticCategory) -> None:
        for ext in [e for e, c in self._extension_map.items() if c == category]:
            del self._extension_map[ext]


# Global registry singleton
_language_registry: Optional[LanguageRegistry] = None


def get_language_registry() -> LanguageRegistry:
    """Get the global language profile registry.

    Returns:
        The singleton registry instance
    """
    global _language_registry
    if _language_registry is None:
        _language_registry = LanguageRegistry()
    return _language_registry


def reset_language_registry() -> None:
    """Reset the global language registry.

    Useful for testing.
    """
    global _language_registry
    _language_registry = None
