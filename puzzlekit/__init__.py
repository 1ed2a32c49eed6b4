"""Classic algorithms on trees, linked lists, sequences and recurrences."""

__version__ = "0.1.0"
__all__ = ["trees", "linked_list", "sequences", "recurrences"]