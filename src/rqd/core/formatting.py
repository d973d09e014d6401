"""Formatting utilities.

Pure functions for formatting benchmark values for display.
"""


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes.

    Returns:
        Formatted string (e.g., "4.2 GB", "128 MB", "1.5 KB").
    """
    if size_bytes >= 1024**3:
        return f"{size_bytes / (1024**3):.1f} GB"
    elif size_bytes >= 1024**2:
        return f"{size_bytes / (1024**2):.1f} MB"
    elif size_bytes >= 1024:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes} B"


def format_ratio(ratio: float) -> str:
    """Format a compression ratio, e.g. ``12.35x``."""
    return f"{ratio:.2f}x"


def format_score(score: float) -> str:
    """Format a VMAF score with two decimals."""
    return f"{score:.2f}"
