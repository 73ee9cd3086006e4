"""Secret Manager integration for configuration management.

Fetches application secrets (the language-model API key, the folder database
password) from Google Cloud Secret Manager when running on GCP.
"""

import logging
import os
from functools import lru_cache

from google.api_core import exceptions as gcp_exceptions
from google.cloud import secretmanager

logger = logging.getLogger(__name__)

SECRET_PREFIX = "article-studio"

# Config key -> secret base name
SECRET_NAMES = {
    "openai_api_key": "openai-api-key",
    "db_password": "db-password",
}


@lru_cache
def get_secret_manager_client() -> secretmanager.SecretManagerServiceClient:
    """Get cached Secret Manager client."""
    return secretmanager.SecretManagerServiceClient()


def get_secret(
    secret_id: str,
    project_id: str | None = None,
    version: str = "latest",
    default: str | None = None,
) -> str | None:
    """Fetch a secret value from Google Cloud Secret Manager.

    Args:
        secret_id: The secret ID (e.g., 'article-studio-openai-api-key-dev')
        project_id: GCP project ID. If None, uses GOOGLE_PROJECT_ID env var.
        version: Secret version (default: 'latest')
        default: Default value if secret is not found

    Returns:
        The secret value as a string, or default if not found.
    """
    project = project_id or os.environ.get("GOOGLE_PROJECT_ID")
    if not project:
        return default

    try:
        client = get_secret_manager_client()
        name = f"projects/{project}/secrets/{secret_id}/versions/{version}"
        response = client.access_secret_version(request={"name": name})
        return response.payload.data.decode("UTF-8")
    except (gcp_exceptions.NotFound, gcp_exceptions.PermissionDenied):
        return default
    except Exception as e:
        # No credentials outside GCP
        logger.debug(f"Could not read secret {secret_id}: {e}")
        return default


def build_secret_id(base_name: str, environment: str | None = None) -> str:
    """Build a secret ID with environment suffix.

    >>> build_secret_id("openai-api-key", "prod")
    'article-studio-openai-api-key-prod'
    """
    env = environment or os.environ.get("ENVIRONMENT", "dev")
    return f"{SECRET_PREFIX}-{base_name}-{env}"


def get_app_secret(key: str, default: str | None = None) -> str | None:
    """Get an application secret by its config key."""
    if key not in SECRET_NAMES:
        return default

    secret_id = build_secret_id(SECRET_NAMES[key])
    return get_secret(secret_id, default=default)
