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

import json
import logging
import os
import sys

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from common import analytics
from common.analytics import JsonFormatter, track_model_call


def test_json_formatter_includes_extra_data():
    record = logging.LogRecord("styleswap", logging.INFO, __file__, 1, "Model Call", None, None)
    record.extra_data = {"event_type": "model_call", "status": "success"}

    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "Model Call"
    assert payload["level"] == "INFO"
    assert payload["event_type"] == "model_call"


def test_track_model_call_logs_success_and_failure(monkeypatch):
    calls = []
    monkeypatch.setattr(
        analytics,
        "log_model_call",
        lambda model_name, status, duration_ms=0, details=None: calls.append((model_name, status, details)),
    )

    with track_model_call("gemini-3-pro-image-preview", prompt_length=10):
        pass
    with pytest.raises(ValueError):
        with track_model_call("gemini-3-pro-image-preview"):
            raise ValueError("bad")

    assert calls[0] == ("gemini-3-pro-image-preview", "success", {"prompt_length": 10})
    assert calls[1][1] == "failure"
    assert calls[1][2]["error"] == "bad"


def test_log_model_call_outside_mesop_context(caplog):
    with caplog.at_level(logging.INFO, logger="styleswap.analytics"):
        analytics.log_model_call("gemini-3-pro-image-preview", status="success", duration_ms=12.345)

    assert "Model Call: gemini-3-pro-image-preview (success)" in caplog.text
