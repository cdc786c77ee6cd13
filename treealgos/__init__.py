"""Binary tree algorithms: a node type, traversals, structural properties and views."""

__version__ = "0.1.0"
__all__ = ["node", "traversals", "properties", "views"]