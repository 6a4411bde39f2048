"""Shared fixtures."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.api.app import app
from backend.api.routes.search import get_search_client
from backend.api.schemas import ProfileDraft
from backend.tools.tavily_search import TavilySearchClient

TEST_API_URL = "https://search.test/search"


@pytest.fixture
def profile_data():
    """Every field filled, snake_case names."""
    return {
        "age": "19",
        "gender": "Female",
        "caste": "OBC",
        "religion": "Hindu",
        "family_income": "1-3 Lakhs",
        "family_occupation": "Farming",
        "academic_performance": "Excellent",
        "location": "Kerala",
        "gpa": "9.1",
        "field_of_study": "Engineering",
        "institution_type": "Government",
    }


@pytest.fixture
def draft(profile_data):
    return ProfileDraft(**profile_data)


@pytest.fixture
def profile(draft):
    return draft.to_profile()


@pytest.fixture
def sample_results():
    return [
        {
            "title": "Post Matric Scholarship for OBC Students",
            "url": "https://scholarships.gov.in/post-matric",
            "content": "Financial assistance for OBC students studying at post-matric level.",
            "score": 0.92,
        },
        {
            "title": "Kerala Merit Scholarship",
            "url": "https://www.buddy4study.com/scholarship/kerala-merit",
            "content": "For meritorious students from Kerala.",
            "score": 0.87,
        },
    ]


class ProviderStub:
    """Records outbound requests and answers with a canned response."""

    def __init__(self, status_code=200, body=None, error=None):
        self.status_code = status_code
        self.body = body if body is not None else {"results": []}
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self):
        return json.loads(self.requests[-1].content)

    def client(self, api_key="test-key") -> TavilySearchClient:
        return TavilySearchClient(
            api_key=api_key, api_url=TEST_API_URL, transport=httpx.MockTransport(self)
        )


@pytest.fixture
def provider():
    """Provider stub answering 200 with no results; adjust attributes per test."""
    return ProviderStub()


@pytest.fixture
def api_client(provider):
    """TestClient whose search dependency talks to the provider stub."""
    app.dependency_overrides[get_search_client] = lambda: provider.client()
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
