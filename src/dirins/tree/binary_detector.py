"""Binary file classification for local directory snapshots."""

from pathlib import Path
from typing import Optional

from dirins.types import PathType

# Extensions whose content is binary with high confidence
BINARY_EXTENSIONS = frozenset(
    {
        # Compiled code and libraries
        ".exe", ".dll", ".so", ".dylib", ".o", ".a", ".lib", ".class", ".jar", ".war", ".pyc", ".pyo",
        ".wasm", ".bin", ".dat",
        # Images
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".psd", ".ico", ".icns", ".webp",
        # Audio and video
        ".mp3", ".aac", ".wav", ".flac", ".ogg", ".m4a", ".mp4", ".mkv", ".avi", ".mov", ".webm",
        # Archives
        ".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz", ".iso",
        # Documents and fonts
        ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".ttf", ".otf", ".woff", ".woff2",
        # Databases
        ".db", ".sqlite", ".sqlite3", ".mdb",
    }
)

# Extensions whose content is text with high confidence
TEXT_EXTENSIONS = frozenset(
    {
        # Source code
        ".py", ".pyi", ".js", ".mjs", ".ts", ".tsx", ".jsx", ".vue", ".svelte", ".java", ".kt", ".kts",
        ".scala", ".groovy", ".gradle", ".c", ".h", ".cpp", ".hpp", ".cs", ".go", ".rs", ".rb", ".php",
        ".pl", ".swift", ".m", ".mm", ".sh", ".sql",
        # Markup and styles
        ".html", ".htm", ".xhtml", ".xml", ".svg", ".css", ".scss", ".less",
        # Documents and configuration
        ".txt", ".md", ".markdown", ".rst", ".tex", ".csv", ".tsv", ".log", ".json", ".yaml", ".yml",
        ".toml", ".ini", ".cfg", ".conf", ".properties", ".env",
    }
)

# Bytes that are allowed in text besides printable ASCII: tab, newline, carriage return
_TEXT_WHITESPACE = (9, 10, 13)

_TEXT_ENCODINGS = ("utf-8", "cp1252", "utf-16", "utf-16-le", "utf-16-be")


def classify_by_extension(file_path: PathType) -> Optional[bool]:
    """Classify a file from its extension alone.

    Args:
        file_path: Path of the file. Only the suffix is inspected.

    Returns:
        True for a known binary extension, False for a known text extension,
        None when the extension gives no answer.

    Example:
        >>> classify_by_extension("logo.PNG")
        True
        >>> classify_by_extension("main.py")
        False
        >>> print(classify_by_extension("Makefile"))
        None
    """
    extension = Path(file_path).suffix.lower()
    if extension in BINARY_EXTENSIONS:
        return True
    if extension in TEXT_EXTENSIONS:
        return False
    return None


def looks_binary(chunk: bytes) -> bool:
    """Decide whether a leading chunk of file content is binary.

    A chunk containing a null byte is binary. Otherwise the chunk is text if one of the
    common text encodings decodes it and at most 1% of its bytes are control characters.
    If no encoding decodes it, it is text only if at least 95% of its bytes are printable.

    Example:
        >>> looks_binary(b"hello\\nworld\\n")
        False
        >>> looks_binary(b"\\x89PNG\\x00\\x00")
        True
    """
    if not chunk:
        return False

    if b"\0" in chunk:
        return True

    for encoding in _TEXT_ENCODINGS:
        try:
            chunk.decode(encoding)
        except UnicodeDecodeError:
            continue
        control_chars = sum(1 for byte in chunk if byte < 32 and byte not in _TEXT_WHITESPACE)
        return control_chars / len(chunk) > 0.01

    printable_chars = sum(1 for byte in chunk if 32 <= byte < 127 or byte in _TEXT_WHITESPACE)
    return printable_chars / len(chunk) < 0.95


def is_binary_file(file_path: PathType, chunk_size: int = 8192) -> bool:
    """Detect if a file is binary using extension hints and content analysis.

    Args:
        file_path: Path to the file to analyze. Can be any path-like object.
        chunk_size: Number of bytes to read for content analysis. Defaults to 8192.

    Returns:
        True if the file appears to be binary, False if it appears to be text.

    Raises:
        OSError: If the file has an unknown extension and cannot be read.

    Example:
        >>> is_binary_file("image.png")
        True
        >>> is_binary_file("README.txt")
        False
    """
    by_extension = classify_by_extension(file_path)
    if by_extension is not None:
        return by_extension

    with open(file_path, "rb") as file:
        chunk = file.read(chunk_size)
    return looks_binary(chunk)
