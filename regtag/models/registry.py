"""Registry response and credential data models."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..errors import DecodeError


@dataclass(frozen=True)
class Credentials:
    """Username and password for a registry. Never persisted."""
    username: str = ""
    password: str = field(default="", repr=False)

    @property
    def anonymous(self) -> bool:
        return not self.username


@dataclass(frozen=True)
class TagList:
    """Body of a ``/v2/<name>/tags/list`` response."""
    name: str
    tags: List[str]

    @classmethod
    def from_json(cls, body: str) -> 'TagList':
        """Create from a tag list response body."""
        try:
            data = json.loads(body)
        except ValueError as e:
            raise DecodeError(f"invalid tag list: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError("invalid tag list: expected a JSON object")

        tags = data.get("tags") or []
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise DecodeError("invalid tag list: 'tags' is not a list of strings")

        return cls(name=data.get("name") or "", tags=list(tags))


@dataclass(frozen=True)
class Manifest:
    """A v2 image manifest, kept as the exact text the registry returned."""
    body: str

    def to_dict(self) -> Dict[str, Any]:
        try:
            data = json.loads(self.body)
        except ValueError as e:
            raise DecodeError(f"invalid manifest: {e}") from e
        if not isinstance(data, dict):
            raise DecodeError("invalid manifest: expected a JSON object")
        return data

    @property
    def config_digest(self) -> str:
        """Digest of the image config blob, e.g. ``sha256:...``."""
        config = self.to_dict().get("config")
        digest = config.get("digest") if isinstance(config, dict) else None
        if not isinstance(digest, str) or not digest:
            raise DecodeError("invalid manifest: no config digest")
        return digest

    def to_bytes(self) -> bytes:
        return self.body.encode("utf-8")
