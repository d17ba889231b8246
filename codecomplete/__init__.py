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

"""Code completion rendering.

Renders candidates from an external code-intelligence server into
editable text, with placeholder templates synthesized from signatures.
"""

from codecomplete.completion import CompletionManager, ServerCompletionProvider
from codecomplete.config import CompletionSettings, load_settings
from codecomplete.languages import SyntacticCategory, get_language_registry

__version__ = "0.1.0"

__all__ = [
    "CompletionManager",
    "CompletionSettings",
    "ServerCompletionProvider",
    "SyntacticCategory",
    "get_language_registry",
    "load_settings",
]
