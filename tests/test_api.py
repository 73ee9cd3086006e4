"""Tests for the FastAPI REST API."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from src.chains import StructureGeneratorChain


@pytest.fixture
def client():
    from src.api.main import app

    return TestClient(app)


def failing_chain(error: Exception) -> StructureGeneratorChain:
    llm = MagicMock()
    llm.ainvoke = AsyncMock(side_effect=error)
    return StructureGeneratorChain(llm=llm)


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_check_returns_ok(self, client):
        """Test that health check returns OK status."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestGenerateArticleStructureEndpoint:
    """Test POST /generate-article-structure."""

    def test_success_returns_result(self, client):
        """A successful completion is relayed as {result}."""
        chain = StructureGeneratorChain(llm=FakeListChatModel(responses=["world"]))

        with patch("src.api.main.structure_generator", chain):
            response = client.post("/generate-article-structure", json={"prompt": "hello"})

        assert response.status_code == 200
        assert response.json() == {"result": "world"}

    def test_empty_completion_returns_empty_result(self, client):
        """A completion without content is relayed as an empty string."""
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=SimpleNamespace(content=None))

        with patch("src.api.main.structure_generator", StructureGeneratorChain(llm=llm)):
            response = client.post("/generate-article-structure", json={"prompt": "hello"})

        assert response.status_code == 200
        assert response.json() == {"result": ""}

    def test_exactly_one_upstream_call(self, client):
        """Each request makes exactly one upstream call."""
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=SimpleNamespace(content="ok"))

        with patch("src.api.main.structure_generator", StructureGeneratorChain(llm=llm)):
            client.post("/generate-article-structure", json={"prompt": "hello"})

        assert llm.ainvoke.await_count == 1

    def test_upstream_failure_returns_generic_error(self, client):
        """Upstream errors become a fixed 500 without leaking details."""
        chain = failing_chain(RuntimeError("invalid api key sk-secret"))

        with patch("src.api.main.structure_generator", chain):
            response = client.post("/generate-article-structure", json={"prompt": "hello"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate article structure"}
        assert "sk-secret" not in response.text

    def test_malformed_completion_returns_generic_error(self, client):
        """Non-text completions are treated as failures."""
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=SimpleNamespace(content=[{"type": "image"}]))

        with patch("src.api.main.structure_generator", StructureGeneratorChain(llm=llm)):
            response = client.post("/generate-article-structure", json={"prompt": "hello"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate article structure"}

    def test_client_construction_failure_returns_generic_error(self, client):
        """Failing to build the model client is reported the same way."""
        with (
            patch("src.api.main.structure_generator", None),
            patch("src.api.main.StructureGeneratorChain", side_effect=RuntimeError("no key")),
        ):
            response = client.post("/generate-article-structure", json={"prompt": "hello"})

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to generate article structure"}

    def test_failure_is_logged(self, client, caplog):
        """The upstream cause is logged server-side."""
        chain = failing_chain(RuntimeError("upstream timeout"))

        with patch("src.api.main.structure_generator", chain):
            client.post("/generate-article-structure", json={"prompt": "hello"})

        assert "Error generating article structure" in caplog.text
        assert "upstream timeout" in caplog.text

    def test_missing_prompt_is_rejected(self, client):
        """A body without prompt fails request validation."""
        response = client.post("/generate-article-structure", json={})

        assert response.status_code == 422

    @pytest.mark.parametrize("method", ["GET", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "HEAD"])
    def test_non_post_methods_return_empty_405(self, client, method):
        """Other methods get an empty 405 and never reach the model."""
        chain = failing_chain(AssertionError("should not be called"))

        with patch("src.api.main.structure_generator", chain):
            response = client.request(method, "/generate-article-structure")

        assert response.status_code == 405
        assert response.content == b""
        assert response.headers["allow"] == "POST"
        chain.llm.ainvoke.assert_not_awaited()

    def test_unknown_path_keeps_default_error(self, client):
        """Errors outside the structure endpoint keep FastAPI's JSON body."""
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}


class TestAPIModels:
    """Test API request and response models."""

    def test_request_model(self):
        """Test GenerateStructureRequest keeps the prompt verbatim."""
        from src.api.models import GenerateStructureRequest

        request = GenerateStructureRequest(prompt="  Lag en disposisjon  ")

        assert request.prompt == "  Lag en disposisjon  "

    def test_error_response_model(self):
        """Test ErrorResponse model."""
        from src.api.models import GENERATION_ERROR_MESSAGE, ErrorResponse

        error = ErrorResponse(error=GENERATION_ERROR_MESSAGE)

        assert error.model_dump() == {"error": "Failed to generate article structure"}
