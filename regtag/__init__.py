"""regtag: list and add tags on a container image registry."""

__version__ = "1.0.0"
