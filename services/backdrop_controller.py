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

"""State transitions for the StyleSwap page.

The controller mutates a page state object (`state.styleswap_state.PageState`
or anything with the same attributes) and never touches Mesop directly, so the
page handlers stay thin.
"""

import logging
import time
from enum import Enum
from typing import Callable, Optional

from common.credentials import CredentialSelector
from common.error_handling import BackdropError, ErrorKind, classify_generation_error
from config.backdrop_presets import get_preset
from models.backdrop import generate_backdrop
from models.image_intake import describe_resolution
from models.requests import GenerationRequest, GenerationResult, UploadedImage

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Something went wrong."


class AppStatus(str, Enum):
    IDLE = "IDLE"
    GENERATING = "GENERATING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class BackdropController:
    """Drives the idle -> generating -> success/error lifecycle."""

    def __init__(
        self,
        state,
        credentials: CredentialSelector,
        generate: Callable[..., GenerationResult] = generate_backdrop,
    ):
        self.state = state
        self.credentials = credentials
        self._generate = generate

    @property
    def status(self) -> AppStatus:
        return AppStatus(self.state.status)

    # Credentials

    def check_credentials(self) -> bool:
        """Queries the credential selector; returns True when a key is selected."""
        has_key = self.credentials.has_selected_api_key()
        self.state.needs_api_key = not has_key
        return has_key

    def connect_api_key(self, api_key: str) -> None:
        """Selects a key and assumes success, as the selection prompt does."""
        self.credentials.select_api_key(api_key)
        self.state.needs_api_key = False

    # Style

    def select_preset(self, preset_id: str) -> None:
        """Selects a preset and clears any custom text so the preset applies."""
        if get_preset(preset_id) is None:
            logger.warning(f"Ignoring unknown preset '{preset_id}'")
            return
        self.state.selected_preset_id = preset_id
        self.state.custom_prompt = ""

    def set_custom_prompt(self, text: str) -> None:
        self.state.custom_prompt = text or ""

    def style_text(self) -> str:
        """Custom text wins when non-empty; otherwise the preset description."""
        custom = (self.state.custom_prompt or "").strip()
        if custom:
            return custom
        preset = get_preset(self.state.selected_preset_id)
        return preset.description if preset else ""

    # Image

    def select_image(self, image: UploadedImage) -> None:
        """Replaces the source photo; any result, error or in-flight call is dropped."""
        self.state.original_image_url = image.data_url
        self.state.original_file_name = image.file_name
        self.state.original_resolution = describe_resolution(image)
        self._clear_outcome()
        self.state.status = AppStatus.IDLE.value
        self.state.generation_id += 1

    def report_intake_error(self, error: BackdropError) -> None:
        """Shows an intake failure without touching the current photo or result."""
        self.state.error_message = error.message

    def reset(self) -> None:
        """Start over: clears image, result, error and custom text."""
        self.state.original_image_url = ""
        self.state.original_file_name = ""
        self.state.original_resolution = ""
        self.state.custom_prompt = ""
        self.state.uploader_key += 1
        self._clear_outcome()
        self.state.status = AppStatus.IDLE.value
        self.state.generation_id += 1

    # Generation

    def begin_generation(self) -> Optional[GenerationRequest]:
        """Moves to GENERATING and returns the request to send.

        Returns None, leaving state unchanged, when there is no photo, a
        generation is already in flight, or a key must be selected first.
        """
        if not self.state.original_image_url:
            return None
        if self.status == AppStatus.GENERATING:
            logger.info("Generation already in flight; ignoring trigger.")
            return None
        if self.state.needs_api_key:
            return None

        style_text = self.style_text()
        if not style_text:
            return None

        self.state.generation_id += 1
        self._clear_outcome()
        self.state.status = AppStatus.GENERATING.value
        return GenerationRequest(
            image=UploadedImage.from_data_url(
                self.state.original_image_url, file_name=self.state.original_file_name
            ),
            style_text=style_text,
            generation_id=self.state.generation_id,
        )

    def _is_current(self, request: GenerationRequest) -> bool:
        if request.generation_id != self.state.generation_id:
            logger.info(
                f"Discarding stale generation {request.generation_id} "
                f"(current is {self.state.generation_id})"
            )
            return False
        return True

    def complete_generation(self, request: GenerationRequest, result: GenerationResult) -> bool:
        """Stores the result unless the request was superseded."""
        if not self._is_current(request):
            return False
        self.state.result_image_url = result.image_data_url
        self.state.error_message = ""
        self.state.status = AppStatus.SUCCESS.value
        return True

    def fail_generation(self, request: GenerationRequest, error: Exception) -> bool:
        """Records a failure unless the request was superseded."""
        if not self._is_current(request):
            return False
        error = classify_generation_error(error)
        self.state.result_image_url = ""
        self.state.error_message = error.message or FALLBACK_ERROR_MESSAGE
        self.state.status = AppStatus.ERROR.value
        # Vertex AI has no key to re-select; the error stays inline
        if error.kind == ErrorKind.CREDENTIAL_CONFIGURATION and self.credentials.accepts_api_key():
            self.state.needs_api_key = True
        return True

    def run_generation(self, request: GenerationRequest) -> bool:
        """Calls the adapter for a begun request; failures become state."""
        start_time = time.time()
        try:
            result = self._generate(
                request.image,
                request.style_text,
                api_key=self.credentials.api_key(),
            )
        except Exception as e:
            logger.error(f"Backdrop generation failed: {e}")
            return self.fail_generation(request, e)
        applied = self.complete_generation(request, result)
        if applied:
            self.state.generation_time = time.time() - start_time
        return applied

    def generate(self) -> bool:
        """Begins and runs a generation. Returns True if state was updated."""
        request = self.begin_generation()
        if request is None:
            return False
        return self.run_generation(request)

    def _clear_outcome(self) -> None:
        self.state.result_image_url = ""
        self.state.generation_time = 0.0
        self.state.error_message = ""
