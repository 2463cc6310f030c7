from .format import Join, Line, Lines, Text, split_lines

__all__ = ("Text", "Join", "Lines", "Line", "split_lines")
