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

"""Structured usage events: page views, clicks and Gemini calls."""

import functools
import json
import logging
import os
import time
from contextlib import contextmanager

import mesop as me
from google.cloud import logging as cloud_logging

from state.state import AppState


class JsonFormatter(logging.Formatter):
    """One JSON object per record; event fields ride on `extra_data`."""

    def format(self, record):
        log_object = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        log_object.update(getattr(record, "extra_data", {}))
        return json.dumps(log_object, default=str)


def get_logger(name: str):
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(logging.INFO)
        # Cloud Run sets K_SERVICE; its handler turns the fields into jsonPayload
        if os.environ.get("K_SERVICE"):
            handler = cloud_logging.Client().get_default_handler()
        else:
            handler = logging.StreamHandler()
            handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    return logger


analytics_logger = get_logger("styleswap.analytics")


def _session_context() -> tuple[str, str]:
    """Returns (page_name, session_id) for the current Mesop request, if any."""
    try:
        state = me.state(AppState)
        return state.current_page, state.session_id
    except Exception:
        # me.state is unavailable outside a Mesop request context
        return "unknown", "unknown"


def _log_event(event_type: str, message: str, **fields):
    analytics_logger.info(message, extra={"extra_data": {"event_type": event_type, **fields}})


def log_page_view(page_name: str, session_id: str = None):
    _log_event("page_view", f"Page view: {page_name}", page_name=page_name, session_id=session_id)


def log_ui_click(element_id: str, page_name: str, session_id: str = None, extras: dict = None):
    """Logs a click; `extras` adds event specific fields such as a file name."""
    _log_event(
        "ui_click",
        f"UI Click: {element_id} on {page_name}",
        element_id=element_id,
        page_name=page_name,
        session_id=session_id,
        **(extras or {}),
    )


def log_model_call(model_name: str, status: str, duration_ms: float = 0, details: dict = None):
    page_name, session_id = _session_context()
    _log_event(
        "model_call",
        f"Model Call: {model_name} ({status})",
        model_name=model_name,
        status=status,
        duration_ms=round(duration_ms, 2),
        page_name=page_name,
        session_id=session_id,
        details=details or {},
    )


def track_click(element_id: str):
    """Decorator that logs a click before running the event handler."""

    def decorator(handler_function):
        @functools.wraps(handler_function)
        def wrapper(*args, **kwargs):
            page_name, session_id = _session_context()
            log_ui_click(element_id=element_id, page_name=page_name, session_id=session_id)
            return handler_function(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def track_model_call(model_name: str, **details):
    """Logs the duration and outcome of the wrapped model call."""
    start_time = time.time()
    try:
        yield
    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        log_model_call(model_name, status="failure", duration_ms=duration_ms, details={"error": str(e), **details})
        raise
    duration_ms = (time.time() - start_time) * 1000
    log_model_call(model_name, status="success", duration_ms=duration_ms, details=details)
