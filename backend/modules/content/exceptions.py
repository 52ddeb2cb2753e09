"""
Content module exceptions.

Default messages are the Portuguese texts shown to users; the edge
function's own ``error`` text replaces them when it sends one.
"""

from typing import Optional

from shared.exceptions import BoothdeskError, ExternalServiceError


class ContentGenerationError(ExternalServiceError):
    """Raised when the generation function fails or returns an unusable payload."""

    def __init__(self, message: Optional[str] = None, status: Optional[int] = None):
        super().__init__(
            message or "Erro ao gerar conteúdo. Tente novamente.",
            service="generate-content",
            code="CONTENT_GENERATION_FAILED",
            details={"status": status} if status is not None else None,
        )


class RateLimitedError(BoothdeskError):
    """Raised when the generation function reports HTTP 429."""

    status_code = 429

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or "Limite de requisições excedido. Tente novamente em alguns minutos.",
            code="CONTENT_RATE_LIMITED",
        )


class CreditsExhaustedError(BoothdeskError):
    """Raised when the generation function reports HTTP 402."""

    status_code = 402

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message or "Créditos insuficientes. Adicione créditos à sua conta.",
            code="CONTENT_CREDITS_EXHAUSTED",
        )
