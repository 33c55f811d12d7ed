"""Configuration management for regtag."""

import os
import yaml
from typing import Dict, Any, Optional

from ..errors import ConfigError


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR')


class Config:
    """Configuration manager for regtag.

    Settings come from the environment first and then from the optional
    YAML file named by ``REGTAG_CONFIG``.
    """
    
    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self.environ = os.environ if environ is None else environ
        self.config_path = self.environ.get('REGTAG_CONFIG')
        
        self._file_config = None

    def validate(self):
        """Load the configuration file and check its values."""
        self.file_config
        self.log_level
        self.progress

    @property
    def file_config(self) -> Dict[str, Any]:
        """Load and cache the YAML configuration file."""
        if self._file_config is None:
            self._file_config = self._load_file_config()
        return self._file_config
    
    def _load_file_config(self) -> Dict[str, Any]:
        if not self.config_path:
            return {}
        
        if not os.path.exists(self.config_path):
            raise ConfigError(f"regtag config file not found: {self.config_path}")
        
        try:
            with open(self.config_path, 'r') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot read regtag config {self.config_path}: {e}") from e
        
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"regtag config {self.config_path} must be a mapping")
        return data
    
    @property
    def log_level(self) -> str:
        """Default log level, overridden on the command line."""
        level = self.environ.get('REGTAG_LOG_LEVEL') or self.file_config.get('log_level') or 'WARNING'
        level = str(level).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"invalid log level: {level}")
        return level
    
    @property
    def docker_config(self) -> Optional[str]:
        """Path of the docker config.json holding registry logins."""
        path = self.environ.get('REGTAG_DOCKER_CONFIG') or self.file_config.get('docker_config')
        return os.path.expanduser(path) if path else None
    
    @property
    def progress(self) -> bool:
        """Whether list mode may draw a progress bar."""
        progress = self.file_config.get('progress', True)
        if not isinstance(progress, bool):
            raise ConfigError(f"invalid progress setting: {progress!r} (expected true or false)")
        return progress
