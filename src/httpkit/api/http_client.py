import json
import logging
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel

from httpkit.api.errors import HttpClientError, HttpError, InvalidPayload, InvalidResponse
from httpkit.api.transport import RequestsTransport
from httpkit.models.exchange import OutgoingRequest, Result, format_headers

logger = logging.getLogger(__name__)

Payload = Union[Mapping[str, Any], BaseModel]


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


class HttpClient:
    """
    Small JSON client bound to one base URL.

    Endpoints are appended to the base URL as given. Responses with a status
    of 400 or above raise HttpError; everything below counts as success.
    """
    def __init__(self, base_url: str, headers: Optional[dict[str, str]] = None, transport=None):
        self.base_url = base_url
        self.headers: dict[str, str] = dict(headers or {})
        self.transport = transport or RequestsTransport()

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def format_headers(self) -> str:
        return format_headers(self.headers)

    def get(self, endpoint: str, expect_json: bool = True):
        return self.send_request("GET", endpoint, None, expect_json)

    def post(self, endpoint: str, payload: Payload, expect_json: bool = True):
        return self.send_request("POST", endpoint, payload, expect_json)

    def put(self, endpoint: str, payload: Payload, expect_json: bool = True):
        return self.send_request("PUT", endpoint, payload, expect_json)

    def options(self, endpoint: str, expect_json: bool = True):
        return self.send_request("OPTIONS", endpoint, None, expect_json)

    def send_request(self, method: str, endpoint: str, payload: Optional[Payload] = None,
                     expect_json: bool = True):
        return self.request(method, endpoint, payload, expect_json).unwrap()

    def request(self, method: str, endpoint: str, payload: Optional[Payload] = None,
                expect_json: bool = True) -> Result:
        """Like send_request, but hands back failures inside the Result instead of raising."""
        try:
            return Result(value=self._send(method, endpoint, payload, expect_json))
        except HttpClientError as e:
            return Result(error=e)

    def _send(self, method: str, endpoint: str, payload: Optional[Payload], expect_json: bool):
        request = self._build_request(method, endpoint, payload, expect_json)

        logger.debug(f"{request.method} {request.url}")
        response = self.transport.dispatch(request)

        status_code = response.status_code
        if status_code >= 400:
            logger.warning(f"{request.method} {request.url} -> {status_code}")
            raise HttpError(status_code, response.body)

        if not expect_json:
            return response.body

        try:
            return json.loads(response.body, parse_constant=_reject_constant)
        except ValueError as e:
            raise InvalidResponse(str(e)) from e

    def _build_request(self, method: str, endpoint: str, payload: Optional[Payload],
                       expect_json: bool) -> OutgoingRequest:
        headers = {str(k): str(v) for k, v in self.headers.items()}
        body = None

        if payload is not None:
            if isinstance(payload, BaseModel):
                payload = payload.model_dump(mode="json")
            try:
                body = json.dumps(payload, allow_nan=False)
            except (TypeError, ValueError) as e:
                raise InvalidPayload(str(e)) from e

            # only for this request, the client's own headers stay untouched
            headers = {k: v for k, v in headers.items() if k.lower() != "content-type"}
            headers["Content-Type"] = "application/json"

        return OutgoingRequest(method=method, url=self.base_url + endpoint,
                               headers=headers, body=body, expect_json=expect_json)

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
