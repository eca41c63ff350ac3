"""Detection of generated cache files named after a UUID."""

import re
from typing import Optional

# e.g. f5086740-a1a1-491b-82c9-ab065a9d1754.json or f5086740-a1a1-491b-82c9-ab065a9d1754@1a2b.json
HASH_FILE_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}(?:\.json|@[0-9a-f]+\.json)$",
    re.IGNORECASE,
)


def is_hash_json(name: Optional[str]) -> bool:
    """Check whether a file name looks like a generated, UUID-named JSON cache file.

    Args:
        name: The file name to check (basename only). None never matches.

    Returns:
        True if the whole name matches the UUID JSON pattern, case-insensitively.

    Example:
        >>> is_hash_json("f5086740-a1a1-491b-82c9-ab065a9d1754.json")
        True
        >>> is_hash_json("F5086740-A1A1-491B-82C9-AB065A9D1754@FF.JSON")
        True
        >>> is_hash_json("package.json")
        False
    """
    return name is not None and HASH_FILE_PATTERN.fullmatch(name) is not None
