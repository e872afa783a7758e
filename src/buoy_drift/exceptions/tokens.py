"""Design token exceptions: schema validation and token source parsing."""

from .base import BuoyError


class TokenError(BuoyError):
    """Base class for design token errors."""

    pass


class TokenValidationError(TokenError):
    """Raised when a token's value shape does not fit its category."""

    def __init__(self, token_name: str, reason: str):
        super().__init__(
            f"Invalid design token: {token_name}",
            details={"token": token_name, "reason": reason},
        )
        self.token_name = token_name
        self.reason = reason


class TokenParseError(TokenError):
    """Raised when a token source file cannot be parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"Cannot parse token source: {source}",
            details={"source": source, "reason": reason},
            hint="Token files are JSON (DTCG, Tokens Studio, Style Dictionary), CSS or SCSS",
        )
        self.source = source
        self.reason = reason
