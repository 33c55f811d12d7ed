"""Add a tag to an existing image."""

import logging
from typing import Any, Dict

from ..errors import error_context
from ..models.reference import Reference
from ..registry.client import RegistryClient


logger = logging.getLogger(__name__)


class AddTagOperation:
    """Re-PUTs the manifest of an existing tag under a new tag name."""
    
    def __init__(self, client: RegistryClient):
        self.client = client
    
    def add_tag(self, reference: Reference, new_tag: str) -> Dict[str, Any]:
        """Point ``new_tag`` at the manifest ``reference`` points at."""
        logger.info(f"Adding tag {new_tag} to {reference}")
        
        base_url = reference.manifest_url(reference.tag)
        with error_context(f"failed to get manifest on {base_url}"):
            manifest = self.client.get_manifest(base_url)
        
        new_url = reference.manifest_url(new_tag)
        with error_context(f"failed to set tag on {new_url}"):
            self.client.put_manifest(new_url, manifest)
        
        logger.info(f"Tagged {reference} as {new_tag}")
        
        return {
            'image': str(reference),
            'tag': new_tag
        }
