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

"""Shared fakes and fixtures for completion tests."""

import pytest

from codecomplete.languages import (
    DEFAULT_PROFILES,
    SyntacticCategory,
    reset_language_registry,
)


class RecordingCodeGenerator:
    """Code generator that remembers requested stubs."""

    def __init__(self):
        self.stubs: list[str] = []

    def generate_override_stub(self, method_name: str) -> None:
        self.stubs.append(method_name)


class RecordingImportManager:
    """Import manager that remembers requested imports."""

    def __init__(self):
        self.imports: list[str] = []

    def add_import(self, qualified_name: str) -> None:
        self.imports.append(qualified_name)


class FakeServer:
    """Code-intelligence server answering from canned records."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def complete(self, command, context):
        self.calls.append((command, context))
        return self.responses.get(command, [])


class RecordingSurface:
    """List surface that records what it was asked to display."""

    def __init__(self):
        self.shown: list[list[str]] = []
        self.scrolls = 0
        self.closes = 0
        self._showing = False

    @property
    def is_showing(self) -> bool:
        return self._showing

    def show(self, labels):
        self.shown.append(list(labels))
        self._showing = True

    def scroll(self):
        self.scrolls += 1

    def close(self):
        self.closes += 1
        self._showing = False


@pytest.fixture(autouse=True)
def _fresh_registry():
    """Keep the global language registry isolated between tests."""
    reset_language_registry()
    yield
    reset_language_registry()


@pytest.fixture
def java_profile():
    return DEFAULT_PROFILES[SyntacticCategory.JAVA]


@pytest.fixture
def xml_profile():
    return DEFAULT_PROFILES[SyntacticCategory.XML]


@pytest.fixture
def c_profile():
    return DEFAULT_PROFILES[SyntacticCategory.C]


@pytest.fixture
def code_generator():
    return RecordingCodeGenerator()


@pytest.fixture
def import_manager():
    return RecordingImportManager()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def make_server():
    """Factory for canned-response servers."""
    return FakeServer
