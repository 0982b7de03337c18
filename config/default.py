# Copyright 2025 Google LLC
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

"""Application configuration, read from the environment."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv(override=True)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class Default:
    """Defaults for the StyleSwap app."""

    # Google Cloud, used only when USE_VERTEXAI is set
    PROJECT_ID: str = os.environ.get("PROJECT_ID", "")
    LOCATION: str = os.environ.get("LOCATION", "global")
    USE_VERTEXAI: bool = _env_flag("USE_VERTEXAI")

    # Gemini Developer API key; can also be connected from the UI
    GEMINI_API_KEY: str = os.environ.get(
        "GEMINI_API_KEY", os.environ.get("GOOGLE_API_KEY", "")
    )

    GEMINI_IMAGE_GEN_MODEL: str = os.environ.get(
        "GEMINI_IMAGE_GEN_MODEL", "gemini-3-pro-image-preview"
    )

    # Backdrop generation parameters
    BACKDROP_ASPECT_RATIO: str = os.environ.get("BACKDROP_ASPECT_RATIO", "1:1")
    BACKDROP_IMAGE_SIZE: str = os.environ.get("BACKDROP_IMAGE_SIZE", "1K")
    BACKDROP_USE_SEARCH: bool = _env_flag("BACKDROP_USE_SEARCH", "true")

    DOWNLOAD_FILE_PREFIX: str = os.environ.get(
        "DOWNLOAD_FILE_PREFIX", "styleswap-gemini3"
    )
    APP_TITLE: str = "StyleSwap"
