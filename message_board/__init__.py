"""In-memory message board served over GraphQL and REST."""

__version__ = "1.0.0"
