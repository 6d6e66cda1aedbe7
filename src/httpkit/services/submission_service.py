import logging

from pydantic import ValidationError

from httpkit.api.errors import HttpClientError
from httpkit.api.http_client import HttpClient
from httpkit.commands.submission import SubmissionCommand
from httpkit.models.token import TokenResponse

logger = logging.getLogger(__name__)


class MissingTokenError(HttpClientError):
    def __init__(self):
        super().__init__("Failed to retrieve the Bearer token.")


class SubmissionService:
    """Two-step handshake: OPTIONS for a bearer token, then an authorized POST."""

    def __init__(self, client: HttpClient, endpoint: str):
        self.client = client
        self.endpoint = endpoint

    def request_token(self) -> str:
        response = self.client.options(self.endpoint)
        try:
            return TokenResponse.model_validate(response).token
        except ValidationError as e:
            logger.debug(f"token response rejected: {e}")
            raise MissingTokenError() from e

    def authorize(self, token: str) -> None:
        self.client.set_header("Authorization", f"Bearer {token}")

    def submit(self, command: SubmissionCommand):
        return self.client.post(self.endpoint, command)
