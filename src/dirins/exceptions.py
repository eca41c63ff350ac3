class PathNotFoundError(Exception):
    """
    Exception raised when a requested path does not resolve to any file-system object.

    Attributes:
        path (str): The path exactly as it was requested.

    Example:
        >>> error = PathNotFoundError("src/missing")
        >>> str(error)
        'File not found: src/missing'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the requested path.

        Args:
            path (str): The path that could not be resolved.
        """
        self.path = path
        super().__init__(f"File not found: {path}")


class DirectoryNotFoundError(Exception):
    """
    Exception raised when a path resolves to something that is not a traversable directory.

    Also raised by the tree renderer when it is handed no root directory at all.

    Attributes:
        path (str): The path exactly as it was requested.

    Example:
        >>> error = DirectoryNotFoundError("README.md")
        >>> str(error)
        'Directory not found: README.md'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the requested path.

        Args:
            path (str): The path that did not resolve to a directory.
        """
        self.path = path
        super().__init__(f"Directory not found: {path}")


class TokenizerNotAvailableError(Exception):
    """
    Exception raised when attempting to use token counting functionality without the required tokenizer package.

    This exception is raised when the `tiktoken` package is not installed but token counting
    is requested for the tree summary. The tiktoken package is an optional dependency that must be
    explicitly installed using the 'token_counting' extra.

    Attributes:
        message (str): Detailed error message including installation instructions.

    Example:
        >>> error = TokenizerNotAvailableError()
        >>> str(error).startswith('Tokenizer (tiktoken) is not installed')
        True
    """

    def __init__(self, message: str = "Tokenizer (tiktoken) is not installed.") -> None:
        self.message = (
            f"{message} To enable token counting, install dirins with the 'token_counting' "
            "extra: 'pip install dirins[token_counting]' or 'poetry install --extras token_counting'."
        )
        super().__init__(self.message)


class TokenizationError(Exception):
    """
    Exception raised when token counting fails during execution.

    Example:
        >>> error = TokenizationError("Failed to tokenize: invalid input")
        >>> str(error)
        'Failed to tokenize: invalid input'
    """

    pass
