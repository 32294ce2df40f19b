import json

import pytest
import requests

from bulkcast.infrastructure.config import Settings, WarpcastSettings
from bulkcast.infrastructure.warpcast import direct_cast_client

API_URL = "https://api.warpcast.com/v2/ext-send-direct-cast"


def make_response(status_code=200, body=None, text=None):
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response.url = API_URL
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = json.dumps(body if body is not None else {}).encode("utf-8")
    return response


class FakePut:
    """Records every PUT and answers with a callable-provided response."""

    def __init__(self, responder):
        self.responder = responder
        self.calls = []

    def __call__(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        result = self.responder(json)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_put(monkeypatch):
    """Install a FakePut; call it with a responder function."""

    def install(responder):
        fake = FakePut(responder)
        monkeypatch.setattr(direct_cast_client.requests, "put", fake)
        return fake

    return install


@pytest.fixture
def write_csv(tmp_path):
    def write(content, name="recipients.csv"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def make_settings(tmp_path):
    def make(input_file, output_file=None, concurrency=1, api_key="secret"):
        return Settings(
            input_file=input_file,
            output_file=output_file or tmp_path / "output.csv",
            warpcast=WarpcastSettings(api_key=api_key),
            concurrency=concurrency,
        )

    return make
