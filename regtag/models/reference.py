"""Image reference parsing."""

from dataclasses import dataclass
from urllib.parse import urlsplit

from ..errors import ParseError


DEFAULT_SCHEME = "https"
DEFAULT_TAG = "latest"


@dataclass(frozen=True)
class Reference:
    """A tag within a repository on a registry.

    ``repository`` keeps the leading slash of the URL path so it can be
    appended to ``/v2`` directly.
    """
    scheme: str
    registry: str
    repository: str
    tag: str = DEFAULT_TAG

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.registry}/v2{self.repository}"

    @property
    def manifests_url(self) -> str:
        """Base URL for manifest operations."""
        return f"{self.base_url}/manifests"

    @property
    def tags_url(self) -> str:
        """URL of the tag list endpoint."""
        return f"{self.base_url}/tags/list"

    def manifest_url(self, tag: str) -> str:
        """URL of the manifest stored under ``tag`` in this repository."""
        return f"{self.manifests_url}/{tag}"

    def __str__(self) -> str:
        return f"{self.registry}{self.repository}:{self.tag}"


def parse_reference(text: str) -> Reference:
    """Parse ``[scheme://]registry/repo[:tag]`` into a Reference.

    A missing scheme defaults to https and a missing tag to ``latest``.
    Raises ParseError when no registry or repository can be found, or
    when the path holds more than one ``:``.
    """
    url = text if "://" in text else f"{DEFAULT_SCHEME}://{text}"

    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise ParseError(f"{e}") from e

    # drop any userinfo, keep host[:port]
    registry = parts.netloc.rpartition("@")[2]
    if not registry:
        raise ParseError(f"registry url not found in {url}")

    segments = parts.path.split(":")
    if len(segments) == 1:
        repository, tag = segments[0], DEFAULT_TAG
    elif len(segments) == 2:
        repository, tag = segments
    else:
        raise ParseError(f"too many ':' separators in {url}")

    if not repository.strip("/"):
        raise ParseError(f"repository not found in {url}")
    if not tag:
        raise ParseError(f"empty tag in {url}")

    return Reference(
        scheme=parts.scheme,
        registry=registry,
        repository=repository,
        tag=tag
    )
