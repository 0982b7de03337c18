# Copyright 2025 Google LLC.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import base64


def to_data_url(data: bytes, mime_type: str) -> str:
    """Encodes raw bytes as a base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def split_data_url(data_url: str) -> tuple[str, str]:
    """Splits a data URL into (mime_type, base64 payload).

    A bare base64 string is returned with an empty mime type.
    """
    if not data_url.startswith("data:") or "," not in data_url:
        return "", data_url
    header, payload = data_url.split(",", 1)
    mime_type = header[len("data:"):].split(";", 1)[0]
    return mime_type, payload
