import logging
from http.cookiejar import DefaultCookiePolicy

import requests

from httpkit.api.errors import TransportFailure
from httpkit.models.exchange import OutgoingRequest, RawResponse

logger = logging.getLogger(__name__)


def _status_line(response: requests.Response) -> str:
    # urllib3 reports the protocol version as 10 / 11
    version = getattr(response.raw, "version", None)
    if not isinstance(version, int) or version <= 0:
        version = 11
    major, minor = divmod(version, 10)
    return f"HTTP/{major}.{minor} {response.status_code} {response.reason or ''}".rstrip()


class RequestsTransport:
    def __init__(self, session: requests.Session | None = None):
        self.session = session or requests.Session()
        # no cookie carries over from one response to the next request
        self.session.cookies.set_policy(DefaultCookiePolicy(allowed_domains=[]))

    def dispatch(self, request: OutgoingRequest) -> RawResponse:
        data = request.body.encode("utf-8") if request.body is not None else None
        try:
            r = self.session.request(request.method, request.url, headers=request.headers, data=data)
        except requests.RequestException as e:
            logger.error(f"{request.method} {request.url} failed: {e}")
            raise TransportFailure(request.url, str(e)) from e

        header_lines = [_status_line(r)]
        header_lines += [f"{name}: {value}" for name, value in r.headers.items()]
        return RawResponse(body=r.text, header_lines=header_lines)

    def close(self):
        self.session.close()
