"""API client for communicating with the FastAPI backend."""

import logging

import httpx

from src.config import settings

logger = logging.getLogger(__name__)


def _get_id_token(audience: str) -> str | None:
    """Get ID token for Cloud Run service-to-service authentication.

    Args:
        audience: The URL of the target service.

    Returns:
        ID token string, or None if not running on GCP or token fetch fails.
    """
    try:
        import google.auth.transport.requests
        import google.oauth2.id_token

        request = google.auth.transport.requests.Request()
        token = google.oauth2.id_token.fetch_id_token(request, audience)
        return token
    except Exception as e:
        logger.debug(f"Could not get ID token (likely running locally): {e}")
        return None


class APIClient:
    """Client for the article structure API."""

    def __init__(self, base_url: str | None = None):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API server. If not provided, uses
                settings.api_url (API_URL env var, default http://localhost:8000).
        """
        self.base_url = base_url or settings.api_url
        self.timeout = 120.0  # 2 minutes for LLM operations

    def _get_auth_headers(self) -> dict[str, str]:
        """Authorization header when running on GCP, empty dict otherwise."""
        token = _get_id_token(self.base_url)
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    def health_check(self) -> bool:
        """Check if the API is healthy.

        Returns:
            True if API is healthy, False otherwise.
        """
        try:
            headers = self._get_auth_headers()
            with httpx.Client(timeout=5.0) as client:
                response = client.get(f"{self.base_url}/health", headers=headers)
                return response.status_code == 200
        except httpx.RequestError:
            return False

    def generate_article_structure(self, prompt: str) -> str:
        """Generate an article structure from a prompt.

        Args:
            prompt: Prompt text.

        Returns:
            Completion text returned by the API.

        Raises:
            httpx.HTTPStatusError: If the API responds with an error status.
            httpx.RequestError: If the API cannot be reached.
            ValueError: If the response body is not a {"result": str} object.
        """
        headers = self._get_auth_headers()
        with httpx.Client(timeout=self.timeout) as client:
            response = client.post(
                f"{self.base_url}/generate-article-structure",
                json={"prompt": prompt},
                headers=headers,
            )
            response.raise_for_status()

        # json.JSONDecodeError is a ValueError
        data = response.json()
        if not isinstance(data, dict) or not isinstance(data.get("result", ""), str):
            raise ValueError(f"Unexpected response body from {response.url}")
        return data.get("result", "")
