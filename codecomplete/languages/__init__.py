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

"""Per-language completion profiles.

Example usage:
    from codecomplete.languages import get_language_registry

    registry = get_language_registry()
    profile = registry.get("java")
    print(profile.command)  # java_complete
"""

from codecomplete.languages.profile import (
    DEFAULT_PROFILES,
    InsertionAction,
    LanguageProfile,
    RecordFields,
    SpanRule,
    SyntacticCategory,
)
from codecomplete.languages.registry import (
    LanguageRegistry,
    get_language_registry,
    reset_language_registry,
)

__all__ = [
    "DEFAULT_PROFILES",
    "InsertionAction",
    "LanguageProfile",
    "RecordFields",
    "SpanRule",
    "SyntacticCategory",
    "LanguageRegistry",
    "get_language_registry",
    "reset_language_registry",
]
