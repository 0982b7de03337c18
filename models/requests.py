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
import time

from pydantic import BaseModel, Field

from common.utils import split_data_url, to_data_url


class UploadedImage(BaseModel):
    """A product photo selected by the user."""

    data: bytes = Field(..., min_length=1)
    mime_type: str
    file_name: str = ""

    @property
    def data_url(self) -> str:
        return to_data_url(self.data, self.mime_type)

    @classmethod
    def from_data_url(cls, data_url: str, file_name: str = "") -> "UploadedImage":
        """Rebuilds an UploadedImage from the data URL kept in page state."""
        mime_type, payload = split_data_url(data_url)
        return cls(data=base64.b64decode(payload), mime_type=mime_type, file_name=file_name)


class GenerationRequest(BaseModel):
    """
    Defines the contract for one backdrop generation.
    `generation_id` ties a response back to the state it was issued from.
    """

    image: UploadedImage
    style_text: str = Field(..., min_length=1)
    generation_id: int = 0


class GenerationResult(BaseModel):
    """A generated backdrop image held for the current session only."""

    image_data_url: str
    timestamp: float = Field(default_factory=time.time)
