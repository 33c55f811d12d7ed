"""Registry credential lookup."""

from .credentials import (
    CredentialResolver,
    DockerCredentialResolver,
    StaticCredentialResolver,
    parse_creds,
)

__all__ = ["CredentialResolver", "DockerCredentialResolver", "StaticCredentialResolver", "parse_creds"]
