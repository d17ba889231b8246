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

"""Completion settings.

Settings are a validated model loaded from YAML. The file may hold the
keys at the top level or under a ``completion:`` section:

```yaml
completion:
  use_templates: true
  auto_import: true
  doc_wrap_width: 80
  list_page_size: 15
  profiles_file: profiles.yaml
```
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class CompletionSettings(BaseModel):
    """User-facing completion configuration."""

    use_templates: bool = Field(default=True, description="Expand placeholder templates")
    auto_import: bool = Field(default=True, description="Import packages of chosen types")
    doc_wrap_width: Optional[int] = Field(
        default=72, gt=0, description="Wrap width for rendered documentation"
    )
    list_page_size: int = Field(default=20, gt=0, description="Candidates per list page")
    case_sensitive: bool = Field(default=True, description="Case-sensitive prefix matching")
    profiles_file: Optional[Path] = Field(
        default=None, description="YAML file with language profile overrides"
    )


def load_settings(path: Path) -> CompletionSettings:
    """Load settings from a YAML file.

    A relative ``profiles_file`` is resolved against the settings file's
    directory.

    Args:
        path: Settings file

    Returns:
        Validated settings (defaults for an empty file)

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If a value is invalid
    """
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    section = data.get("completion", data) or {}
    settings = CompletionSettings.model_validate(section)

    if settings.profiles_file is not None and not settings.profiles_file.is_absolute():
        settings = settings.model_copy(update={"profiles_file": path.parent / settings.profiles_file})

    logger.info(f"Loaded completion settings from {path}")
    return settings
