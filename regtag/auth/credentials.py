"""Resolve registry credentials from stored logins or the command line."""

import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

from docker.auth import load_config
from docker.errors import DockerException

from ..errors import CredentialError
from ..models.registry import Credentials


logger = logging.getLogger(__name__)


class CredentialResolver(ABC):
    """Looks up the credentials to use for a registry host."""

    @abstractmethod
    def resolve(self, registry: str) -> Credentials:
        """Return the credentials for ``registry``, empty for anonymous access."""


class StaticCredentialResolver(CredentialResolver):
    """Always returns the same credentials, whatever the registry."""

    def __init__(self, credentials: Credentials):
        self.credentials = credentials

    def resolve(self, registry: str) -> Credentials:
        return self.credentials


class DockerCredentialResolver(CredentialResolver):
    """Reads the credentials stored by ``podman login`` or ``docker login``.

    The containers auth files are tried first, in this order:
    ``$REGISTRY_AUTH_FILE``, ``$XDG_RUNTIME_DIR/containers/auth.json`` and
    ``~/.config/containers/auth.json``. The docker config comes last.
    Every file uses the docker ``auths`` format, so plain entries,
    ``credsStore`` and ``credHelpers`` are all handled by the docker SDK.
    A registry with no stored login resolves to anonymous credentials.

    An explicit ``config_path`` is the only file read.
    """

    def __init__(self, config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None):
        self.config_path = config_path
        self.environ = os.environ if environ is None else environ

    def auth_files(self) -> List[Optional[str]]:
        """Files to search in order; None stands for docker's own lookup."""
        if self.config_path:
            return [self.config_path]

        candidates = [self.environ.get('REGISTRY_AUTH_FILE')]
        runtime_dir = self.environ.get('XDG_RUNTIME_DIR')
        if runtime_dir:
            candidates.append(os.path.join(runtime_dir, 'containers', 'auth.json'))
        home = self.environ.get('HOME') or os.path.expanduser('~')
        candidates.append(os.path.join(home, '.config', 'containers', 'auth.json'))

        # load_config falls back to the docker config for missing paths
        files: List[Optional[str]] = [path for path in candidates if path and os.path.isfile(path)]
        files.append(None)
        return files

    def resolve(self, registry: str) -> Credentials:
        for path in self.auth_files():
            try:
                auth_configs = load_config(config_path=path, credstore_env=None)
                auth_cfg = auth_configs.resolve_authconfig(registry)
            except DockerException as e:
                raise CredentialError(f"{e}") from e

            if auth_cfg:
                logger.debug(f"Using stored credentials for {registry} from {path or 'docker config'}")
                return Credentials(
                    username=_lookup(auth_cfg, "Username") or "",
                    password=_lookup(auth_cfg, "Password") or ""
                )

        logger.debug(f"No stored credentials for {registry}, using anonymous access")
        return Credentials()


def _lookup(auth_cfg: Dict[str, Any], key: str) -> Optional[str]:
    """Read a key that the docker SDK may return capitalised or not."""
    if key in auth_cfg:
        return auth_cfg[key]
    return auth_cfg.get(key.lower())


def parse_creds(value: str) -> Credentials:
    """Parse ``username[:password]``, splitting once on the first ``:``."""
    username, _, password = value.partition(":")
    return Credentials(username=username, password=password)
