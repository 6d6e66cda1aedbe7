class HttpClientError(Exception):
    """Base class for everything HttpClient raises."""


class InvalidPayload(HttpClientError):
    def __init__(self, reason: str):
        super().__init__(f"Invalid JSON payload: {reason}")
        self.reason = reason


class HttpError(HttpClientError):
    def __init__(self, status_code: int, body: str):
        super().__init__(f"HTTP error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class InvalidResponse(HttpClientError):
    def __init__(self, reason: str):
        super().__init__(f"Invalid JSON response: {reason}")
        self.reason = reason


class TransportFailure(HttpClientError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url
        self.reason = reason
