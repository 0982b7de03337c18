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

"""Reads a user-selected file into an UploadedImage."""

import io
import logging

from PIL import Image

from common.error_handling import IntakeError
from models.requests import UploadedImage

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"


def load_image(file) -> UploadedImage:
    """Reads an uploaded file (e.g. `me.UploadedFile`) into memory.

    The declared mime type is trusted; the uploader already limits the
    picker to image types.

    Raises:
        IntakeError: if the file cannot be read or is empty.
    """
    name = getattr(file, "name", "") or ""
    try:
        if hasattr(file, "getvalue"):
            data = file.getvalue()
        else:
            data = file.read()
    except Exception as e:
        logger.error(f"Could not read uploaded file '{name}': {e}")
        raise IntakeError(f"Could not read '{name or 'the selected file'}'.") from e

    if not data:
        raise IntakeError(f"'{name or 'The selected file'}' is empty.")

    mime_type = getattr(file, "mime_type", "") or DEFAULT_MIME_TYPE
    logger.info(f"Loaded '{name}' ({mime_type}, {len(data)} bytes)")
    return UploadedImage(data=data, mime_type=mime_type, file_name=name)


def describe_resolution(image: UploadedImage) -> str:
    """Returns the image resolution as "WxH", or "Unknown"."""
    try:
        with Image.open(io.BytesIO(image.data)) as img:
            return f"{img.width}x{img.height}"
    except Exception as e:
        logger.info(f"Error getting resolution: {e}")
        return "Unknown"
