from typing import List, Optional


def clean_entries(entries: Optional[List[Optional[str]]]) -> List[str]:
    """Function to trim option or row labels and drop the blank ones

    Args:
        entries (Optional[List[Optional[str]]]): Labels as typed, may hold None or blank strings

    Returns:
        List[str]: Trimmed non blank labels in their original order
    """
    if not entries:
        return []

    return [entry.strip() for entry in entries if entry and entry.strip()]
