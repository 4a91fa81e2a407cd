"""Binary trees with parent links, traversals, metrics and ASCII rendering."""

__version__ = "0.1.0"
__all__ = ["metrics", "node", "printer", "traversal"]