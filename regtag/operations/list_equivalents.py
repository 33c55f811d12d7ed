"""Find the tags that point at the same image as a given tag."""

import logging
from typing import Any, Dict, List, Tuple

from ..errors import error_context
from ..models.reference import Reference
from ..registry.client import RegistryClient
from ..utils.progress import ProgressReporter


logger = logging.getLogger(__name__)


class ListEquivalentsOperation:
    """Compares config digests across every tag of a repository."""
    
    def __init__(self, client: RegistryClient, progress: bool = True):
        self.client = client
        self.progress = progress
    
    def find_equivalents(self, reference: Reference) -> Dict[str, Any]:
        """Return the tags whose manifest shares the base tag's config digest.

        Rows are ``(tag, digest)``: the base tag first, then every match
        in the order the registry listed the tags.
        """
        logger.info(f"Looking for tags equivalent to {reference}")
        
        base_url = reference.manifest_url(reference.tag)
        with error_context(f"failed to get manifest on {base_url}"):
            base_digest = self.client.get_manifest(base_url).config_digest
        logger.debug(f"Base tag {reference.tag} has config digest {base_digest}")
        
        with error_context("listTags failed"):
            tags = self.client.list_tags(reference.tags_url)
        
        candidates = [tag for tag in tags if tag != reference.tag]
        rows: List[Tuple[str, str]] = [(reference.tag, base_digest)]
        
        with ProgressReporter(len(candidates), enabled=self.progress) as progress:
            for tag in candidates:
                url = reference.manifest_url(tag)
                with error_context(f"failed to get manifest on {url}"):
                    digest = self.client.get_manifest(url).config_digest
                
                matched = digest == base_digest
                if matched:
                    rows.append((tag, digest))
                progress.update(matched)
        
        logger.info(f"Found {len(rows) - 1} tags equivalent to {reference}")
        
        return {
            'image': str(reference),
            'digest': base_digest,
            'rows': rows
        }
