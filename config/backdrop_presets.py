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

"""Backdrop style presets and the shared photography guidelines."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StylePreset:
    """A named background style offered as a one-click choice."""

    id: str
    name: str
    description: str  # Sent to the model as the style text
    icon: str  # Material Symbols icon name


BACKDROP_PRESETS: Tuple[StylePreset, ...] = (
    StylePreset(
        id="boho_artisan",
        name="Boho Artisan",
        description="A warm, textured setting with macrame, dried pampas grass, and soft golden-hour light on a reclaimed wood surface.",
        icon="wb_sunny",
    ),
    StylePreset(
        id="modern_farmhouse",
        name="Modern Farmhouse",
        description="A clean, rustic white-washed wooden table with a sprig of lavender and linen napkins in soft morning light.",
        icon="home",
    ),
    StylePreset(
        id="botanical_studio",
        name="Botanical Studio",
        description="A minimalist scene with terracotta pots, monstera leaves, and organic shadows on a lime-wash plaster wall.",
        icon="eco",
    ),
    StylePreset(
        id="scandi_minimalist",
        name="Scandi Minimalist",
        description="Light oak wood flooring, a simple ceramic vase, and airy, high-key lighting for a clean, modern boutique look.",
        icon="deployed_code",
    ),
)

DEFAULT_PRESET_ID = BACKDROP_PRESETS[0].id


def get_preset(preset_id: str) -> Optional[StylePreset]:
    """Returns the preset with the given id, or None."""
    return next((p for p in BACKDROP_PRESETS if p.id == preset_id), None)


STYLE_GUIDELINES = """
You are a specialized commercial photographer for top-tier Etsy shops.
Your goal is to transform basic product photos into high-end, "Artisan-style" lifestyle shots.

Aesthetic Guidelines:
1. Etsy Vibes: Use warm, organic textures (linen, wood, stone, ceramic).
2. Lighting: Prioritize "soft-box" natural light or "golden hour" warmth. Avoid harsh artificial shadows.
3. Composition: Use shallow depth of field (bokeh) to isolate the product while keeping the background recognizable as a cozy, high-end home or studio.
4. Product Integrity: DO NOT alter the product itself. Keep its size, shape, color, and labels identical.
5. Integration: Place the product realistically on the surface (add contact shadows and reflections where appropriate).
"""
