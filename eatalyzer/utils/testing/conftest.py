import json

import pytest

from eatalyzer import create_app
from eatalyzer.config.settings import TestingConfig
from eatalyzer.errors import AnalysisError
from eatalyzer.models.nutrition import NutritionAnalysis
from eatalyzer.models.session import ImageUpload

from .samples import JPEG_BYTES, MEAL_REPLY, FakeAnalysisClient


@pytest.fixture
def meal_reply():
    return json.loads(json.dumps(MEAL_REPLY))


@pytest.fixture
def meal_analysis(meal_reply):
    return NutritionAnalysis.from_wire(meal_reply)


@pytest.fixture
def jpeg_upload():
    return ImageUpload.from_bytes("meal.jpg", "image/jpeg", JPEG_BYTES)


@pytest.fixture
def png_upload():
    return ImageUpload.from_bytes("salad.png", "image/png", b"\x89PNG\r\n\x1a\n" + b"\x01" * 64)


@pytest.fixture
def text_upload():
    return ImageUpload.from_bytes("notes.txt", "text/plain", b"not an image")


@pytest.fixture
def failing_client():
    return FakeAnalysisClient(error=AnalysisError("Failed to analyze food image"))


@pytest.fixture
def app_factory():
    def _make(client):
        return create_app(TestingConfig, analysis_client=client)
    return _make
