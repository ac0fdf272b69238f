"""
Number formatting for plot labels.
"""


def format_number(value, format_spec='.2f'):
    """
    Format a number with a proper Unicode minus sign.

    Args:
        value: Numeric value to format
        format_spec: Format specification (e.g., '.1f', '.2f')

    Returns:
        str: Formatted string
    """
    if isinstance(value, (int, float)):
        if value < 0:
            return '−' + format(abs(value), format_spec)
        return format(value, format_spec)
    return str(value)


def format_point(point, format_spec='.2f'):
    """Format a 2D point as '(x, y)'."""
    x, y = (float(v) for v in point)
    return f"({format_number(x, format_spec)}, {format_number(y, format_spec)})"
