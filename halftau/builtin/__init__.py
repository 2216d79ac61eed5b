"""Primitive built-ins that operate on evaluated arguments."""
