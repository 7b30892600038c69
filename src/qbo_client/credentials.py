"""
OAuth token storage for long-running QuickBooks integrations.

Intuit rotates the refresh token on every refresh, so the new pair has to
be written back after each refresh or the next run is locked out. The
secret is a JSON document holding client_id, client_secret, redirect_url,
access_token, refresh_token and realm_id.
"""

import base64
import json
import logging
from typing import Any, Dict, Optional, Tuple

from boto3.session import Session
from botocore.exceptions import ClientError
from intuitlib.client import AuthClient

from .config import QboConfig

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("client_id", "client_secret", "redirect_url", "refresh_token", "realm_id")


class SecretsManagerTokenStore:
    """Keeps the QuickBooks OAuth secret in AWS Secrets Manager."""

    def __init__(
        self,
        secret_name: str,
        region_name: str = "us-east-2",
        client: Optional[Any] = None,
    ) -> None:
        self.secret_name = secret_name
        self.client = client or Session().client(
            service_name="secretsmanager", region_name=region_name
        )

    def load(self) -> Dict[str, Any]:
        try:
            response = self.client.get_secret_value(SecretId=self.secret_name)
        except ClientError as e:
            logger.error(
                "Failed to read QuickBooks secret",
                extra={
                    "secret_name": self.secret_name,
                    "error_code": e.response.get("Error", {}).get("Code"),
                },
            )
            raise

        # Depending on how the secret was stored only one of these is set.
        if "SecretString" in response:
            raw = response["SecretString"]
        else:
            raw = base64.b64decode(response["SecretBinary"])
        secret = json.loads(raw)

        missing = [key for key in REQUIRED_KEYS if not secret.get(key)]
        if missing:
            raise KeyError(f"secret {self.secret_name} is missing {', '.join(missing)}")
        return secret

    def save(self, secret: Dict[str, Any]) -> None:
        self.client.put_secret_value(
            SecretId=self.secret_name, SecretString=json.dumps(secret)
        )


def refresh_auth_client(
    store: Any,
    config: Optional[QboConfig] = None,
    auth_client: Optional[AuthClient] = None,
) -> Tuple[AuthClient, str]:
    """
    Refresh the access token and persist the rotated pair.

    Returns the ready ``AuthClient`` and the realm id stored with it. An
    existing ``auth_client`` is reused with the stored tokens.
    """
    config = config or QboConfig()
    secret = store.load()

    if auth_client is None:
        auth_client = AuthClient(
            client_id=secret["client_id"],
            client_secret=secret["client_secret"],
            redirect_uri=secret["redirect_url"],
            access_token=secret.get("access_token"),
            refresh_token=secret["refresh_token"],
            environment=config.environment,
        )
    # the stored secret may be newer than what this client last saw
    auth_client.access_token = secret.get("access_token")
    auth_client.refresh_token = secret["refresh_token"]
    auth_client.refresh()

    secret["access_token"] = auth_client.access_token
    secret["refresh_token"] = auth_client.refresh_token
    store.save(secret)
    logger.info("Refreshed QuickBooks tokens", extra={"realm_id": secret["realm_id"]})
    return auth_client, str(secret["realm_id"])
