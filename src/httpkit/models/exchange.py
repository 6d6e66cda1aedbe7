import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from httpkit.api.errors import HttpClientError

STATUS_LINE_PATTERN = re.compile(r"HTTP/\d\.\d\s+(\d+)")


def format_headers(headers: dict[str, str]) -> str:
    return "\r\n".join(f"{name}: {value}" for name, value in headers.items())


def parse_status_code(header_lines: list[str]) -> int:
    """Status code from the first header line, 0 if it is missing or malformed."""
    if not header_lines:
        return 0
    match = STATUS_LINE_PATTERN.search(header_lines[0])
    if match is None:
        return 0
    return int(match.group(1))


class OutgoingRequest(BaseModel):
    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: Optional[str] = None
    expect_json: bool = True

    @property
    def header_block(self) -> str:
        return format_headers(self.headers)


class RawResponse(BaseModel):
    body: str = ""
    header_lines: list[str] = Field(default_factory=list) # status line first

    @property
    def status_code(self) -> int:
        return parse_status_code(self.header_lines)


class Result(BaseModel):
    """Either the value of a finished call or the error that stopped it."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    value: Any = None
    error: Optional[HttpClientError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.value
