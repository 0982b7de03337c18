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

import base64
import os
import sys

import pytest
from google.genai import types

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from common.error_handling import (
    CredentialConfigurationError,
    ErrorKind,
    GenerationFailedError,
    NoImageProducedError,
    NoResponseError,
)
from config.backdrop_presets import STYLE_GUIDELINES
from fakes import FakeClient, create_png_bytes, image_part, make_response, text_part
from models import backdrop
from models.backdrop import (
    build_backdrop_prompt,
    build_generation_config,
    extract_image_data_url,
    generate_backdrop,
)
from models.requests import UploadedImage

STYLE = "a marble countertop in bright daylight"


@pytest.fixture
def product_image():
    return UploadedImage(data=create_png_bytes(), mime_type="image/jpeg", file_name="photo.jpg")


def test_prompt_embeds_style_constraints_and_guidelines():
    prompt = build_backdrop_prompt(STYLE)

    assert "Replace the background of this product image" in prompt
    assert f"Style: {STYLE}." in prompt
    assert "Preserve the product exactly" in prompt
    assert "Match lighting and shadows" in prompt
    assert "shallow depth of field" in prompt
    assert prompt.endswith(STYLE_GUIDELINES)


def test_generation_config_requests_single_square_1k_image():
    config = build_generation_config("gemini-3-pro-image-preview")

    assert config.response_modalities == ["IMAGE", "TEXT"]
    assert config.image_config.aspect_ratio == "1:1"
    assert config.image_config.image_size == "1K"


def test_generation_config_adds_search_only_for_models_that_support_it(monkeypatch):
    monkeypatch.setattr(backdrop.cfg, "BACKDROP_USE_SEARCH", True)

    pro = build_generation_config("gemini-3-pro-image-preview")
    flash = build_generation_config("gemini-2.5-flash-image")

    assert pro.tools and pro.tools[0].google_search is not None
    assert not flash.tools
    assert flash.image_config.image_size is None


def test_generation_config_without_search(monkeypatch):
    monkeypatch.setattr(backdrop.cfg, "BACKDROP_USE_SEARCH", False)

    assert not build_generation_config("gemini-3-pro-image-preview").tools


def test_sends_image_bytes_mime_type_and_prompt(product_image):
    client = FakeClient(response=make_response(image_part(b"result-bytes")))

    generate_backdrop(product_image, STYLE, client=client, model_name="gemini-3-pro-image-preview")

    assert len(client.models.calls) == 1
    call = client.models.calls[0]
    assert call["model"] == "gemini-3-pro-image-preview"
    inline_part, prompt = call["contents"]
    assert inline_part.inline_data.data == product_image.data
    assert inline_part.inline_data.mime_type == "image/jpeg"
    assert prompt == build_backdrop_prompt(STYLE)
    assert isinstance(call["config"], types.GenerateContentConfig)


def test_returns_first_image_part_as_png_data_url(product_image):
    response = make_response(
        text_part("Here is your new scene."),
        image_part(b"first-image", mime_type="image/jpeg"),
        image_part(b"second-image"),
    )
    client = FakeClient(response=response)

    result = generate_backdrop(product_image, STYLE, client=client)

    expected = base64.b64encode(b"first-image").decode("ascii")
    assert result.image_data_url == f"data:image/png;base64,{expected}"
    assert result.timestamp > 0


def test_identical_requests_are_always_resent(product_image):
    client = FakeClient(response=make_response(image_part(b"img")))

    generate_backdrop(product_image, STYLE, client=client)
    generate_backdrop(product_image, STYLE, client=client)

    assert len(client.models.calls) == 2


def test_extract_fails_with_no_response_when_no_parts():
    with pytest.raises(NoResponseError):
        extract_image_data_url(make_response())
    with pytest.raises(NoResponseError):
        extract_image_data_url(types.GenerateContentResponse(candidates=[]))


def test_extract_fails_with_no_image_when_text_only():
    response = make_response(text_part("I cannot do that."), text_part("Sorry."))

    with pytest.raises(NoImageProducedError) as excinfo:
        extract_image_data_url(response)

    assert excinfo.value.message == "No image was generated. Please try a more descriptive prompt."


def test_empty_response_surfaces_as_no_response(product_image):
    client = FakeClient(response=make_response())

    with pytest.raises(NoResponseError) as excinfo:
        generate_backdrop(product_image, STYLE, client=client)

    assert excinfo.value.kind == ErrorKind.NO_RESPONSE
    assert excinfo.value.message == "No response from Gemini 3."


def test_missing_entity_error_becomes_credential_error(product_image):
    client = FakeClient(error=Exception("Requested entity was not found."))

    with pytest.raises(CredentialConfigurationError) as excinfo:
        generate_backdrop(product_image, STYLE, client=client)

    assert excinfo.value.message == "API Key configuration issue. Please re-select your Gemini API key."


def test_other_errors_are_surfaced_verbatim(product_image):
    client = FakeClient(error=RuntimeError("429 RESOURCE_EXHAUSTED: quota exceeded"))

    with pytest.raises(GenerationFailedError) as excinfo:
        generate_backdrop(product_image, STYLE, client=client)

    assert excinfo.value.message == "429 RESOURCE_EXHAUSTED: quota exceeded"


def test_error_without_message_uses_fallback(product_image):
    client = FakeClient(error=RuntimeError())

    with pytest.raises(GenerationFailedError) as excinfo:
        generate_backdrop(product_image, STYLE, client=client)

    assert excinfo.value.message == "Failed to connect to Gemini 3 API."
