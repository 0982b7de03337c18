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

import typing

import mesop as me


@me.web_component(path="./download_button.js")
def download_button(
    *,
    data_url: str,
    file_prefix: str,
    label: str = "Save HD",
    on_download: typing.Callable[[me.WebEvent], None] | None = None,
    key: str | None = None,
):
    """Saves a data URL to disk in the browser; no server round trip.

    The file is named `<file_prefix>-<epoch millis>.png` when clicked.
    """
    return me.insert_web_component(
        key=key,
        name="download-button",
        properties={
            "dataUrl": data_url,
            "filePrefix": file_prefix,
            "label": label,
        },
        events={
            "downloadEvent": on_download,
        },
    )
