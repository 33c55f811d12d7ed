"""Client for the tag and manifest endpoints of the registry HTTP API v2."""

import base64
import logging
from typing import Dict, List, Optional

import requests

from ..errors import RegistryError, TransportError
from ..models.registry import Credentials, Manifest, TagList


logger = logging.getLogger(__name__)

MANIFEST_V2 = "application/vnd.docker.distribution.manifest.v2+json"


def basic_auth(username: str, password: str) -> str:
    """Encode ``username:password`` for a Basic authorization header."""
    auth = f"{username}:{password}"
    return base64.b64encode(auth.encode("utf-8")).decode("ascii")


def _explicit_auth_only(request):
    """Leave the request as built; Authorization comes from the headers."""
    return request


class RegistrySession(requests.Session):
    """A requests session that never adds ~/.netrc credentials on its own.

    Proxy and CA bundle settings from the environment still apply.
    """

    def __init__(self):
        super(RegistrySession, self).__init__()
        # a session level auth stops the netrc lookup on the first request
        self.auth = _explicit_auth_only

    def rebuild_auth(self, prepared_request, response):
        """Strip Authorization on cross-host redirects, without the netrc fallback."""
        headers = prepared_request.headers
        if "Authorization" in headers and self.should_strip_auth(response.request.url, prepared_request.url):
            del headers["Authorization"]


class RegistryClient:
    """Lists tags and reads and writes manifests on a registry."""
    
    def __init__(self, credentials: Optional[Credentials] = None,
                 session: Optional[requests.Session] = None):
        self.credentials = credentials or Credentials()
        self._session = session
    
    @property
    def session(self) -> requests.Session:
        """Lazy initialization of the HTTP session."""
        if self._session is None:
            self._session = RegistrySession()
        return self._session
    
    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = dict(extra or {})
        if not self.credentials.anonymous:
            headers["Authorization"] = "Basic " + basic_auth(
                self.credentials.username, self.credentials.password
            )
        return headers
    
    def _request(self, method: str, url: str, headers: Optional[Dict[str, str]] = None,
                 data: Optional[bytes] = None) -> requests.Response:
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, headers=self._headers(headers), data=data)
        except requests.RequestException as e:
            raise TransportError(f"{method} {url}: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return response
    
    def list_tags(self, url: str) -> List[str]:
        """Return the tags of a repository in the order the registry sent them."""
        response = self._request("GET", url)
        body = response.content.decode("utf-8", errors="replace")
        if response.status_code != 200:
            raise RegistryError(
                f"listing tags failed: {body}",
                status_code=response.status_code,
                body=body
            )
        
        return TagList.from_json(body).tags
    
    def get_manifest(self, url: str) -> Manifest:
        """Fetch the v2 manifest at ``url`` as the registry returned it."""
        response = self._request("GET", url, headers={"Accept": MANIFEST_V2})
        body = response.content.decode("utf-8", errors="replace")
        if response.status_code != 200:
            raise RegistryError(
                f"getting manifest failed: {body}",
                status_code=response.status_code,
                body=body
            )
        
        return Manifest(body)
    
    def put_manifest(self, url: str, manifest: Manifest):
        """Store ``manifest`` at ``url``, which names the new tag."""
        response = self._request(
            "PUT", url,
            headers={"Content-Type": MANIFEST_V2},
            data=manifest.to_bytes()
        )
        if response.status_code != 201:
            raise RegistryError(
                f"tagging failed, got status {response.status_code}",
                status_code=response.status_code,
                body=response.content.decode("utf-8", errors="replace")
            )
