"""Position utilities for string command sources.

Helper functions for converting character offsets to line/column
positions for error reporting. Translatable strings are usually a single
line, but sources loaded from multi-line catalog entries are supported.
"""


def line_offset(source: str, pos: int) -> int:
    """Get 0-based line number from character offset.

    Example:
        >>> source = "line1\\nline2\\nline3"
        >>> line_offset(source, 0)
        0
        >>> line_offset(source, 6)
        1
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    return source.count("\n", 0, pos)


def column_offset(source: str, pos: int) -> int:
    """Get 0-based column number from character offset.

    Example:
        >>> source = "hello\\nworld"
        >>> column_offset(source, 2)
        2
        >>> column_offset(source, 6)
        0
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(source))

    line_start = source.rfind("\n", 0, pos)
    if line_start == -1:
        return pos
    return pos - line_start - 1


def format_position(source: str, pos: int, zero_based: bool = True) -> str:
    """Format position as human-readable line:column string.

    Example:
        >>> source = "hello\\nworld\\ntest"
        >>> format_position(source, 6, zero_based=True)
        '1:0'
        >>> format_position(source, 6, zero_based=False)
        '2:1'
    """
    line = line_offset(source, pos)
    col = column_offset(source, pos)

    if not zero_based:
        line += 1
        col += 1

    return f"{line}:{col}"


def get_error_context(source: str, pos: int, context_lines: int = 2, marker: str = "^") -> str:
    """Get formatted error context showing position in source.

    Shows the error line with surrounding context lines and a marker
    pointing to the error column.

    Example:
        >>> print(get_error_context("Hello {1} world", 6))
        Hello {1} world
              ^
    """
    line_num = line_offset(source, pos)
    col_num = column_offset(source, pos)

    lines = source.split("\n")

    start_line = max(0, line_num - context_lines)
    end_line = min(len(lines), line_num + context_lines + 1)

    context = []
    for i in range(start_line, end_line):
        context.append(lines[i])
        if i == line_num:
            context.append(" " * col_num + marker)

    return "\n".join(context)
