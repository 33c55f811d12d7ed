import json
from typing import Dict, List, Optional, Tuple

import pytest
import requests

from regtag.models.registry import Credentials
from regtag.registry.client import RegistryClient


def manifest_body(config_digest: str) -> str:
    return json.dumps({
        "schemaVersion": 2,
        "mediaType": "application/vnd.docker.distribution.manifest.v2+json",
        "config": {
            "mediaType": "application/vnd.docker.container.image.v1+json",
            "size": 1469,
            "digest": config_digest,
        },
        "layers": [],
    })


class FakeResponse:
    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.content = body.encode("utf-8")


class FakeSession:
    """Answers requests from a table keyed by (method, url) and records them."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], FakeResponse] = {}
        self.requests: List[dict] = []

    def add(self, method: str, url: str, status_code: int, body: str = ""):
        self.routes[(method, url)] = FakeResponse(status_code, body)

    def request(self, method: str, url: str, headers: Optional[dict] = None, data: Optional[bytes] = None):
        self.requests.append({"method": method, "url": url, "headers": dict(headers or {}), "data": data})
        try:
            return self.routes[(method, url)]
        except KeyError:
            raise requests.ConnectionError(f"no route to {method} {url}")


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> RegistryClient:
    return RegistryClient(Credentials(), session=session)
