# genshin_gateway/core/domain/exceptions.py
class GatewayError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Request Errors ---

class InvalidURLError(GatewayError):
    """Raised when a request path cannot be resolved into a ParsedRequest."""

# --- Upstream Errors ---

class UpstreamNotFoundError(GatewayError):
    """Raised when the upstream repository answers with a non-success status."""
    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)
