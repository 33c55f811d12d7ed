"""Data models for image references and registry responses."""

from .reference import Reference, parse_reference
from .registry import Credentials, Manifest, TagList

__all__ = ["Credentials", "Manifest", "Reference", "TagList", "parse_reference"]
