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

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class GeminiImageModelConfig:
    """Capabilities of a Gemini image model usable for backdrop swaps."""

    model_name: str  # API model ID, e.g. "gemini-3-pro-image-preview"
    display_name: str  # Shown in the header badge

    supported_aspect_ratios: List[str] = field(
        default_factory=lambda: ["1:1", "3:4", "4:3", "9:16", "16:9"]
    )
    supported_image_sizes: List[str] = field(default_factory=lambda: ["1K"])
    supports_image_size: bool = False
    supports_search: bool = False


GEMINI_IMAGE_MODELS: List[GeminiImageModelConfig] = [
    GeminiImageModelConfig(
        model_name="gemini-3-pro-image-preview",
        display_name="Gemini 3 Pro Image",
        supported_image_sizes=["1K", "2K", "4K"],
        supports_image_size=True,
        supports_search=True,
    ),
    GeminiImageModelConfig(
        model_name="gemini-2.5-flash-image",
        display_name="Gemini 2.5 Flash Image",
    ),
]


def get_gemini_image_model_config(model_name: str) -> Optional[GeminiImageModelConfig]:
    """Looks up a model's capabilities by its API model ID."""
    for model in GEMINI_IMAGE_MODELS:
        if model.model_name == model_name:
            return model
    return None
