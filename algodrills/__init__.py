"""Solutions to classic array, string, linked-list, tree and search exercises."""

__version__ = "0.1.0"

__all__ = ["arrays", "linked_list", "recent", "search", "strings", "trees"]