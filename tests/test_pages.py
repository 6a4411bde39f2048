"""
API tests for the server-rendered pages.
"""

import pytest
from starlette.requests import Request

from backend.api.routes.pages import render
from backend.flow.fields import FORM_FIELDS
from backend.flow.page import FormStep
from backend.flow.wizard import WizardState


@pytest.fixture
def form_body(profile_data):
    """Form-encoded profile as the rendered pages post it."""
    body = {f.alias: "" for f in FORM_FIELDS}
    body["disability"] = "None"
    body.update({f.alias: profile_data[f.name] for f in FORM_FIELDS if f.name in profile_data})
    return body


class TestLandingAndStart:
    """Test GET / and POST /start."""

    def test_landing(self, api_client):
        response = api_client.get("/")

        assert response.status_code == 200
        assert "Chatra Shayak" in response.text
        assert 'action="/start"' in response.text

    def test_start_shows_step_one(self, api_client):
        response = api_client.post("/start")

        assert response.status_code == 200
        assert "Step 1 of 2: Personal Details" in response.text
        assert 'name="familyIncome"' in response.text
        assert 'value="next"' in response.text


class TestFormActions:
    """Test POST /form."""

    def test_next_with_missing_fields_shows_errors(self, api_client, form_body):
        form_body.update({"step": "1", "action": "next", "age": "", "caste": ""})

        response = api_client.post("/form", data=form_body)

        assert response.status_code == 200
        assert "Step 1 of 2" in response.text
        assert response.text.count("This field is required") == 2

    def test_next_advances_and_keeps_step_one_values(self, api_client, form_body):
        form_body.update({"step": "1", "action": "next"})

        response = api_client.post("/form", data=form_body)

        assert "Step 2 of 2: Academic Information" in response.text
        assert '<input type="hidden" name="familyOccupation" value="Farming">' in response.text
        assert "Additional information" in response.text

    def test_previous(self, api_client, form_body):
        form_body.update({"step": "2", "action": "previous"})

        response = api_client.post("/form", data=form_body)

        assert "Step 1 of 2" in response.text

    def test_submit_with_missing_field_shows_message(self, api_client, provider, form_body):
        form_body.update({"step": "2", "action": "submit", "gpa": ""})

        response = api_client.post("/form", data=form_body)

        assert "Step 2 of 2" in response.text
        assert "GPA is required" in response.text
        assert provider.requests == []

    def test_submit_renders_results(self, api_client, provider, form_body, sample_results):
        provider.body = {"results": sample_results}
        form_body.update({"step": "2", "action": "submit"})

        response = api_client.post("/form", data=form_body)

        assert response.status_code == 200
        assert "Scholarship Results" in response.text
        assert response.text.count('class="card result-card"') == 2
        assert "Relevance: 92%" in response.text
        assert "Relevance: 87%" in response.text
        assert ">buddy4study.com" in response.text
        assert "Showing scholarships for Female students in Kerala" in response.text
        assert "Kerala" in provider.last_payload["query"]

    def test_submit_with_no_results_shows_empty_state(self, api_client, provider, form_body):
        form_body.update({"step": "2", "action": "submit"})

        response = api_client.post("/form", data=form_body)

        assert 'id="empty-state"' in response.text
        assert "No Scholarships Found" in response.text
        assert "Modify Search" in response.text
        assert "result-card" not in response.text

    def test_provider_error_shows_empty_state(self, api_client, provider, form_body):
        provider.status_code = 503
        provider.body = {"detail": "down"}
        form_body.update({"step": "2", "action": "submit"})

        response = api_client.post("/form", data=form_body)

        assert 'id="empty-state"' in response.text

    def test_malformed_results_stay_on_form(self, api_client, provider, form_body):
        provider.body = {"results": ["not a result"]}
        form_body.update({"step": "2", "action": "submit"})

        response = api_client.post("/form", data=form_body)

        assert "Step 2 of 2" in response.text
        assert "reach the scholarship search" not in response.text

    def test_failure_message_when_enabled(self, api_client, provider, form_body, monkeypatch):
        monkeypatch.setattr("backend.config.settings.surface_search_errors", True)
        provider.body = {"results": "not a list"}
        form_body.update({"step": "2", "action": "submit"})

        response = api_client.post("/form", data=form_body)

        assert "Step 2 of 2" in response.text
        assert "reach the scholarship search" in response.text

    def test_submit_from_step_one_rejected(self, api_client, form_body):
        form_body.update({"step": "1", "action": "submit"})

        response = api_client.post("/form", data=form_body)

        assert response.status_code == 400

    def test_unknown_action_rejected(self, api_client, form_body):
        form_body.update({"step": "1", "action": "jump"})

        response = api_client.post("/form", data=form_body)

        assert response.status_code == 400


class TestBack:
    """Test POST /back."""

    def test_back_returns_to_form_with_values(self, api_client, form_body):
        form_body["step"] = "2"

        response = api_client.post("/back", data=form_body)

        assert response.status_code == 200
        assert "Step 2 of 2" in response.text
        assert 'value="9.1"' in response.text

    def test_back_with_incomplete_profile_rejected(self, api_client, form_body):
        form_body.update({"step": "2", "age": ""})

        response = api_client.post("/back", data=form_body)

        assert response.status_code == 400


class TestFormRendering:
    """Test the form page rendered directly from a state."""

    @staticmethod
    def make_request():
        return Request({"type": "http", "method": "POST", "path": "/form", "headers": []})

    def test_loading_disables_submit(self, draft):
        state = FormStep(wizard=WizardState(step=2, draft=draft), loading=True)

        html = render(self.make_request(), state).body.decode()

        assert 'id="submit-button" disabled' in html
        # Button label plus the client-side busy label in the script
        assert html.count("Searching...") == 2

    def test_idle_submit_enabled(self, draft):
        state = FormStep(wizard=WizardState(step=2, draft=draft))

        html = render(self.make_request(), state).body.decode()

        assert 'id="submit-button" disabled' not in html
        assert html.count("Searching...") == 1
        assert "Find Scholarships" in html


class TestSubmitEdgeCases:
    """Test POST /form submits with partial data."""

    def test_missing_step_one_field_shows_step_one(self, api_client, provider, form_body):
        form_body.update({"step": "2", "action": "submit", "age": ""})

        response = api_client.post("/form", data=form_body)

        assert "Step 1 of 2: Personal Details" in response.text
        assert "Age is required" in response.text
        assert provider.requests == []

    def test_result_with_null_content_still_rendered(
        self, api_client, provider, form_body, sample_results
    ):
        partial = {
            "title": "Vidya Scholarship",
            "url": "https://www.vidyasaarathi.co.in/v",
            "content": None,
        }
        provider.body = {"results": [partial, *sample_results]}
        form_body.update({"step": "2", "action": "submit"})

        response = api_client.post("/form", data=form_body)

        assert response.text.count('class="card result-card"') == 3
        assert "Vidya Scholarship" in response.text
        assert ">vidyasaarathi.co.in" in response.text
