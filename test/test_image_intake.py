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
import os
import sys

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from common.error_handling import ErrorKind, IntakeError
from common.utils import split_data_url
from fakes import FakeUpload, create_png_bytes
from models.image_intake import DEFAULT_MIME_TYPE, describe_resolution, load_image
from models.requests import UploadedImage


def test_load_image_reads_bytes_and_mime_type():
    data = create_png_bytes(8, 6)

    image = load_image(FakeUpload(data, name="photo.png", mime_type="image/png"))

    assert image.data == data
    assert image.mime_type == "image/png"
    assert image.file_name == "photo.png"
    assert image.data_url == "data:image/png;base64," + base64.b64encode(data).decode("ascii")


def test_missing_mime_type_defaults():
    image = load_image(FakeUpload(b"abc", mime_type=""))

    assert image.mime_type == DEFAULT_MIME_TYPE


def test_unreadable_file_raises_intake_error():
    with pytest.raises(IntakeError) as excinfo:
        load_image(FakeUpload(error=OSError("permission denied"), name="locked.jpg"))

    assert excinfo.value.kind == ErrorKind.INTAKE
    assert "locked.jpg" in excinfo.value.message


def test_empty_file_raises_intake_error():
    with pytest.raises(IntakeError):
        load_image(FakeUpload(b""))


def test_data_url_round_trip_through_page_state():
    original = load_image(FakeUpload(create_png_bytes(), name="photo.jpg", mime_type="image/jpeg"))

    rebuilt = UploadedImage.from_data_url(original.data_url, file_name="photo.jpg")

    assert rebuilt == original


def test_resolution():
    image = load_image(FakeUpload(create_png_bytes(8, 6)))

    assert describe_resolution(image) == "8x6"


def test_resolution_of_non_image_is_unknown():
    image = load_image(FakeUpload(b"not an image"))

    assert describe_resolution(image) == "Unknown"


def test_split_data_url():
    assert split_data_url("data:image/png;base64,QUJD") == ("image/png", "QUJD")
    assert split_data_url("QUJD") == ("", "QUJD")
