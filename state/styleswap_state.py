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

import mesop as me

from config.backdrop_presets import DEFAULT_PRESET_ID


@me.stateclass
class PageState:
    """StyleSwap Page State"""

    status: str = "IDLE"  # AppStatus value

    # Source photo
    original_image_url: str = ""  # data URL
    original_file_name: str = ""
    original_resolution: str = ""
    uploader_key: int = 0

    # Style
    selected_preset_id: str = DEFAULT_PRESET_ID
    custom_prompt: str = ""
    custom_prompt_key: int = 0  # bump to reset the textarea

    # Result
    result_image_url: str = ""
    generation_time: float = 0.0

    error_message: str = ""
    needs_api_key: bool = False
    api_key_input: str = ""
    selected_api_key: str = ""  # connected by this session only

    # Bumped whenever an in-flight generation must be discarded
    generation_id: int = 0
