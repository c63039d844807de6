"""
Presentation Service Authentication

Exchanges the account email and password for a bearer access token.
"""

import logging
from typing import Optional

import requests

from presenter.config import AlaiConfig
from presenter.errors import ConfigurationError, ProtocolError
from presenter.remote import post_json


logger = logging.getLogger(__name__)


class AlaiAuthenticator:
    """Password-grant token exchange against the service's auth endpoint.

    Example:
        >>> token = AlaiAuthenticator(config.alai).authenticate()
    """

    def __init__(self, config: AlaiConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def authenticate(self) -> str:
        """Obtain a bearer token.

        Returns:
            Access token for the Authorization header

        Raises:
            ConfigurationError: If email or password is not configured
            RemoteCallError: If the exchange is rejected
            ProtocolError: If the response has no access token
        """
        if not self.config.email or not self.config.password:
            raise ConfigurationError(
                "ALAI_EMAIL and ALAI_PASSWORD must be provided in environment variables"
            )

        logger.info("Authenticating with Alai...")

        headers = {
            "apikey": self.config.anon_key,
            "Authorization": f"Bearer {self.config.anon_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "email": self.config.email,
            "password": self.config.password,
            "gotrue_meta_security": {},
        }

        data = post_json(
            self.session,
            self.config.auth_url,
            "authenticate with Alai",
            payload,
            headers=headers,
            timeout=self.config.timeout,
        )

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            raise ProtocolError("Authentication failed: No access token received")

        logger.info("Authentication successful")
        return access_token
