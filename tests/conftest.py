"""
Shared fixtures: a fake transport that records outgoing requests and
answers from a queue of canned responses.
"""

import pytest

from httpkit.api.http_client import HttpClient
from httpkit.models.exchange import RawResponse

BASE_URL = "https://api.example.test"


def make_response(status_line, body="", extra_headers=None):
    return RawResponse(body=body, header_lines=[status_line] + list(extra_headers or []))


class FakeTransport:
    def __init__(self):
        self.sent = []
        self.responses = []
        self.closed = False

    def queue(self, status_line, body=""):
        self.responses.append(make_response(status_line, body))

    def dispatch(self, request):
        self.sent.append(request)
        return self.responses.pop(0)

    def close(self):
        self.closed = True


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return HttpClient(BASE_URL, transport=transport)
