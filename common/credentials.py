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

"""API credential selection used by the backdrop controller."""

import logging
from typing import Optional, Protocol

from config.default import Default

logger = logging.getLogger(__name__)


class CredentialSelector(Protocol):
    """Answers "is a credential selected" and lets the user pick one."""

    def has_selected_api_key(self) -> bool: ...

    def accepts_api_key(self) -> bool: ...

    def select_api_key(self, api_key: str) -> None: ...

    def api_key(self) -> Optional[str]: ...


class SessionCredentialSelector:
    """Keeps the user's key on their own session state.

    The state object needs a `selected_api_key` attribute. A key from the
    environment is the default for every session; a key the user connects
    only applies to the session that connected it. With Vertex AI enabled,
    application default credentials are used and no key is ever asked for.
    """

    def __init__(self, state, cfg: Default | None = None):
        cfg = cfg or Default()
        self.state = state
        self._use_vertexai = cfg.USE_VERTEXAI
        self._default_api_key = cfg.GEMINI_API_KEY or None

    def accepts_api_key(self) -> bool:
        return not self._use_vertexai

    def has_selected_api_key(self) -> bool:
        return self._use_vertexai or bool(self.api_key())

    def select_api_key(self, api_key: str) -> None:
        api_key = (api_key or "").strip()
        if not api_key:
            logger.warning("Ignoring empty API key selection.")
            return
        self.state.selected_api_key = api_key
        logger.info("Gemini API key selected for this session.")

    def api_key(self) -> Optional[str]:
        return self.state.selected_api_key or self._default_api_key
