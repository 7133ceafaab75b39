"""tasklist: a small task-list backend with GraphQL and HTTP adapters."""

__version__ = "0.1.0"
