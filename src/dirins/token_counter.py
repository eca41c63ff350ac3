"""Line, character and token counts for rendered listings.

Token counting uses OpenAI's tiktoken library, an optional dependency installed
with the ``token_counting`` extra. Without a model, or without tiktoken, only
lines and characters are counted.
"""

import importlib.util
from collections import namedtuple
from typing import Any, Optional

from dirins.exceptions import TokenizationError, TokenizerNotAvailableError

CountResult = namedtuple("CountResult", ["lines", "tokens", "characters"])


def tiktoken_available() -> bool:
    """Check if the tiktoken library is installed."""
    return importlib.util.find_spec("tiktoken") is not None


class TokenCounter:
    """Running counter of lines, characters and (optionally) tokens.

    Attributes:
        model (Optional[str]): Model whose tokenizer is used, or None to skip token counting.
        encoder (Optional[Any]): The tiktoken encoding, when token counting is enabled.

    Example:
        >>> counter = TokenCounter()
        >>> counter.count("src/\\n  └── main.py\\n")
        CountResult(lines=2, tokens=None, characters=19)

    Raises:
        TokenizerNotAvailableError: If a model is given but tiktoken is not installed.
        ValueError: If tiktoken has no tokenizer for the given model.
    """

    def __init__(self, model: Optional[str] = None):
        self.model = model
        self.encoder: Optional[Any] = None

        if model is not None:
            if not tiktoken_available():
                raise TokenizerNotAvailableError()
            self.encoder = self._get_encoder(model)

        self.reset_counts()

    @staticmethod
    def _get_encoder(model: str) -> Any:
        import tiktoken

        try:
            return tiktoken.encoding_for_model(model)
        except KeyError:
            raise ValueError(
                f"Could not load tokenizer for model '{model}'. Consider using a well-supported "
                "model like 'gpt-4' (cl100k_base encoding) for an approximate token count."
            )

    def count(self, text: str) -> CountResult:
        """Count lines, tokens and characters in text and add them to the running totals.

        Returns:
            CountResult with the counts for this text; ``tokens`` is None when token
            counting is disabled.

        Raises:
            TokenizationError: If the encoder fails on the text.
        """
        lines = text.count("\n")
        chars = len(text)
        tokens = None

        if self.encoder is not None:
            try:
                tokens = len(self.encoder.encode(text))
            except Exception as e:
                raise TokenizationError(f"Failed to tokenize text: {str(e)}")
            self._total_tokens = (self._total_tokens or 0) + tokens

        self._total_lines += lines
        self._total_characters += chars
        return CountResult(lines=lines, tokens=tokens, characters=chars)

    def get_total_tokens(self) -> Optional[int]:
        """Total tokens counted so far, or None when token counting is disabled."""
        return self._total_tokens

    def get_total_lines(self) -> int:
        return self._total_lines

    def get_total_characters(self) -> int:
        return self._total_characters

    def reset_counts(self) -> None:
        """Reset all running totals, keeping the tokenizer configuration."""
        self._total_tokens: Optional[int] = None if self.encoder is None else 0
        self._total_lines = 0
        self._total_characters = 0
