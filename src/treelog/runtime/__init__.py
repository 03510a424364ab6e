from .context import ROOT_CONTEXT, LogContext, current_log_context, log_context

__all__ = [
    "LogContext",
    "ROOT_CONTEXT",
    "current_log_context",
    "log_context",
]
