"""Tag operations run by the command line driver."""

from .add_tag import AddTagOperation
from .list_equivalents import ListEquivalentsOperation

__all__ = ["AddTagOperation", "ListEquivalentsOperation"]
