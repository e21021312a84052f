"""A vertical bullet-hell shooter with JSON-defined enemies, levels and scores."""

__version__ = "0.1.0"