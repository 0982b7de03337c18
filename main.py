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

"""StyleSwap server: the Mesop app mounted under FastAPI."""

import logging
import os

import mesop as me
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.wsgi import WSGIMiddleware

from common.error_handling import UnknownHandlerIdFilter
from config.default import Default

# Registers the Mesop page
import pages.styleswap  # noqa: F401  pylint: disable=unused-import

logging.basicConfig(level=logging.INFO)
logging.getLogger("mesop").addFilter(UnknownHandlerIdFilter())

app = FastAPI(title=Default().APP_TITLE)


@app.get("/health")
def health():
    """Liveness probe for Cloud Run."""
    return {"status": "ok"}


app.mount(
    "/",
    WSGIMiddleware(
        me.create_wsgi_app(debug_mode=os.environ.get("DEBUG_MODE", "") == "true")
    ),
)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 8080)),
        reload=os.environ.get("DEBUG_MODE", "") == "true",
    )
