"""Shared fixtures for the script engine tests."""

import json
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_short_service
from app.main import app
from app.services.script import TemplateScriptGenerator
from app.services.short_generator import ShortScriptService


@pytest.fixture
def remote_payload() -> dict:
    """A well-formed model reply for a 30 second short."""
    return {
        "title": "🦋 Butterfly Magic!",
        "description": "Flutter into fun facts! #Butterflies #KidsLearning",
        "scenes": [
            {
                "sceneNumber": 1,
                "duration": 10,
                "visualDescription": "A caterpillar munching a leaf",
                "narration": "This tiny caterpillar is very hungry!",
                "textOverlay": "MUNCH!",
            },
            {
                "sceneNumber": 2,
                "duration": 10,
                "visualDescription": "A chrysalis hanging from a branch",
                "narration": "Now it takes a long nap inside a cozy case.",
                "textOverlay": "SHHH...",
            },
            {
                "sceneNumber": 3,
                "duration": 10,
                "visualDescription": "A colorful butterfly flying through flowers",
                "narration": "Surprise! It is a beautiful butterfly!",
                "textOverlay": "TA-DA! 🦋",
            },
        ],
        "totalDuration": 30,
    }


@pytest.fixture
def remote_json(remote_payload: dict) -> str:
    return json.dumps(remote_payload)


@pytest.fixture
def template_service() -> ShortScriptService:
    return ShortScriptService(TemplateScriptGenerator())


@pytest.fixture
def client(template_service: ShortScriptService) -> Generator[TestClient, None, None]:
    """API client wired to the template generator."""
    app.dependency_overrides[get_short_service] = lambda: template_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
