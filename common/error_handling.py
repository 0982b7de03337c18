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

import logging
from enum import Enum

# Dedicated logger for tracking the suppressed error
race_condition_logger = logging.getLogger("styleswap.race_condition_tracker")

MISSING_ENTITY_MARKER = "Requested entity was not found"


class ErrorKind(str, Enum):
    """User-facing categories for backdrop failures."""

    CREDENTIAL_CONFIGURATION = "credential_configuration"
    NO_RESPONSE = "no_response"
    NO_IMAGE_PRODUCED = "no_image_produced"
    GENERATION_FAILED = "generation_failed"
    INTAKE = "intake"


class BackdropError(Exception):
    """Base exception for backdrop generation and intake errors."""

    kind = ErrorKind.GENERATION_FAILED

    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class CredentialConfigurationError(BackdropError):
    """The upstream project or API key reference could not be found."""

    kind = ErrorKind.CREDENTIAL_CONFIGURATION

    def __init__(self, message="API Key configuration issue. Please re-select your Gemini API key."):
        super().__init__(message)


class NoResponseError(BackdropError):
    kind = ErrorKind.NO_RESPONSE

    def __init__(self, message="No response from Gemini 3."):
        super().__init__(message)


class NoImageProducedError(BackdropError):
    kind = ErrorKind.NO_IMAGE_PRODUCED

    def __init__(self, message="No image was generated. Please try a more descriptive prompt."):
        super().__init__(message)


class GenerationFailedError(BackdropError):
    kind = ErrorKind.GENERATION_FAILED

    def __init__(self, message="Failed to connect to Gemini 3 API."):
        super().__init__(message or "Failed to connect to Gemini 3 API.")


class IntakeError(BackdropError):
    """The selected file could not be read."""

    kind = ErrorKind.INTAKE


def classify_generation_error(error: Exception) -> BackdropError:
    """Maps any error raised around a generation call to a BackdropError.

    Errors that are already classified pass through unchanged.
    """
    if isinstance(error, BackdropError):
        return error
    message = getattr(error, "message", None) or str(error)
    if MISSING_ENTITY_MARKER in message:
        return CredentialConfigurationError()
    return GenerationFailedError(message)


class UnknownHandlerIdFilter(logging.Filter):
    """A logging filter to suppress 'Unknown handler id' errors."""
    def filter(self, record):
        # Suppress the specific benign error message from Mesop
        if "Unknown handler id" in record.getMessage():
            # Log to a separate, non-disruptive logger for tracking purposes
            race_condition_logger.info("Suppressed 'Unknown handler id' error", extra={"original_record": record.getMessage()})
            return False # Prevent the original logger from processing it
        return True
