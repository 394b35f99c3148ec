class TokenListError(Exception):
    """Base class for errors that abort a token list run."""


class PlausibilityError(TokenListError):
    """An upstream list came back too short to be trusted."""

    def __init__(self, source: str, count: int, minimum: int = 5):
        self.source = source
        self.count = count
        self.minimum = minimum
        super().__init__(
            f"no {source} info is returned from Binance DEX: got {count}, need at least {minimum}"
        )


class PrecisionError(TokenListError, ValueError):
    """A decimal amount cannot be represented in satoshi units."""
