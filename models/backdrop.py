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

"""Backdrop replacement with the Gemini image model."""

import logging
from typing import Optional

from google import genai
from google.genai import types

from common.analytics import track_model_call
from common.error_handling import (
    NoImageProducedError,
    NoResponseError,
    classify_generation_error,
)
from common.utils import to_data_url
from config.backdrop_presets import STYLE_GUIDELINES
from config.default import Default
from config.gemini_image_models import get_gemini_image_model_config
from models.requests import GenerationResult, UploadedImage

cfg = Default()

logger = logging.getLogger(__name__)

# Gemini returns PNG bytes for image output
RESULT_MIME_TYPE = "image/png"


def init_client(api_key: Optional[str] = None) -> genai.Client:
    """Initializes the GenAI client.

    A new client is created per call so a freshly selected key is picked up.
    """
    if cfg.USE_VERTEXAI:
        return genai.Client(vertexai=True, project=cfg.PROJECT_ID, location=cfg.LOCATION)
    return genai.Client(api_key=api_key or cfg.GEMINI_API_KEY or None)


def build_backdrop_prompt(style_text: str) -> str:
    """Builds the instruction sent alongside the product photo."""
    return (
        "Replace the background of this product image with a high-end lifestyle setting.\n"
        f"Style: {style_text}.\n\n"
        "Preserve the product exactly. Match lighting and shadows. Use shallow depth of field.\n"
        f"Context: {STYLE_GUIDELINES}"
    )


def build_generation_config(model_name: str) -> types.GenerateContentConfig:
    """Single 1:1 image at the configured size, with search grounding where supported."""
    model_config = get_gemini_image_model_config(model_name)

    image_config_args = {"aspect_ratio": cfg.BACKDROP_ASPECT_RATIO}
    if model_config is None or model_config.supports_image_size:
        image_config_args["image_size"] = cfg.BACKDROP_IMAGE_SIZE

    config_args = {
        "response_modalities": ["IMAGE", "TEXT"],
        "image_config": types.ImageConfig(**image_config_args),
    }
    if cfg.BACKDROP_USE_SEARCH and model_config and model_config.supports_search:
        config_args["tools"] = [types.Tool(google_search=types.GoogleSearch())]

    return types.GenerateContentConfig(**config_args)


def extract_image_data_url(response: types.GenerateContentResponse) -> str:
    """Returns the first inline image in the response as a PNG data URL.

    Raises:
        NoResponseError: the response carries no content parts.
        NoImageProducedError: no part carries an image (text-only reply).
    """
    candidates = response.candidates or []
    content = candidates[0].content if candidates else None
    parts = content.parts if content else None
    if not parts:
        raise NoResponseError()

    for part in parts:
        if part.inline_data and part.inline_data.data:
            return to_data_url(part.inline_data.data, RESULT_MIME_TYPE)
        if part.text:
            logger.info(f"Model commentary: {part.text}")

    raise NoImageProducedError()


def generate_backdrop(
    image: UploadedImage,
    style_text: str,
    *,
    client: Optional[genai.Client] = None,
    api_key: Optional[str] = None,
    model_name: Optional[str] = None,
) -> GenerationResult:
    """
    Replaces the background of a product photo in the given style.

    Args:
        image: The uploaded product photo.
        style_text: Natural-language description of the new background.
        client: Optional pre-built client; one is created per call otherwise.
        api_key: Gemini API key to use when creating the client.
        model_name: Overrides the configured image model.

    Returns:
        The generated image as a PNG data URL with its creation timestamp.

    Raises:
        BackdropError: a classified failure (credential, empty response,
            text-only response, or any other upstream error).
    """
    model_name = model_name or cfg.GEMINI_IMAGE_GEN_MODEL
    prompt = build_backdrop_prompt(style_text)

    try:
        with track_model_call(
            model_name=model_name,
            prompt_length=len(prompt),
            aspect_ratio=cfg.BACKDROP_ASPECT_RATIO,
            input_mime_type=image.mime_type,
        ):
            if client is None:
                client = init_client(api_key)
            response = client.models.generate_content(
                model=model_name,
                contents=[
                    types.Part.from_bytes(data=image.data, mime_type=image.mime_type),
                    prompt,
                ],
                config=build_generation_config(model_name),
            )
            image_data_url = extract_image_data_url(response)
    except Exception as e:
        logger.error(f"Gemini image API error: {e}")
        error = classify_generation_error(e)
        if error is e:
            raise
        raise error from e

    return GenerationResult(image_data_url=image_data_url)
