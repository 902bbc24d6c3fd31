import json
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from promptforge.dependencies import get_text_generator
from promptforge.main import app

DOG_ANALYSIS = {
    "intent": "A picture of a dog",
    "subject": "dog",
    "style": "unspecified",
    "mood": "unspecified",
    "technicalDetails": [],
    "ambiguityScore": 0.9,
}


class FakeGenerator:
    """Scripted stand-in for the Gemini call. JSON-mode calls get the analysis, others the refinement."""

    def __init__(self, analysis=DOG_ANALYSIS, refined: Optional[str] = "A loyal golden retriever in a sunlit meadow", error: Exception = None):
        self.analysis_text = json.dumps(analysis) if isinstance(analysis, (dict, list)) else analysis
        self.refined_text = refined
        self.error = error
        self.calls = []

    def __call__(self, system_instruction: str, user_message: str, json_output: bool = False) -> Optional[str]:
        self.calls.append({
            "system_instruction": system_instruction,
            "user_message": user_message,
            "json_output": json_output,
        })
        if self.error:
            raise self.error
        return self.analysis_text if json_output else self.refined_text


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def api():
    def _client(generator: FakeGenerator) -> TestClient:
        app.dependency_overrides[get_text_generator] = lambda: generator
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()
