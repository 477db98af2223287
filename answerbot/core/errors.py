"""
Application errors for answer providers.

Providers raise ProviderError internally when an external service answers with
an unexpected payload. The error never leaves the provider: its public
operation logs it and reports "no answer" so the pipeline moves on.
"""


class ProviderError(Exception):
    """Raised when an external answer source returns something we cannot use."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        self.message = message
        super().__init__(f"{provider}: {message}")
