"""Request-scoped logging context.

Fields pushed here (request_id, client_id, source, ...) are copied onto every
log record emitted while the context is active. Storage uses contextvars so
concurrent matching requests never see each other's fields.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional


LogContextVar: ContextVar[Dict[str, Any]] = ContextVar("peermatch_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the active logging context."""
    return LogContextVar.get().copy()


def push_log_context(**fields: Any) -> Token:
    """Merge fields into the active context.

    Args:
        **fields: Key-value pairs to attach to subsequent log records

    Returns:
        Token for restoring the previous context with pop_log_context()
    """
    current = LogContextVar.get()
    return LogContextVar.set({**current, **fields})


def pop_log_context(token: Token) -> None:
    """Restore the context that was active before push_log_context()."""
    LogContextVar.reset(token)


def clear_log_context() -> None:
    """Drop every context field. Mostly used by tests."""
    LogContextVar.set({})


class log_context:
    """Context manager that scopes logging fields to a block.

    Example:
        >>> with log_context(request_id="req-42", client_id="c-7"):
        ...     logger.info("Matching started")  # carries request_id and client_id
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
