from .guard import Condition, DEFAULT_MESSAGE, must, preconditions
from .loop import do_whilst, times, whilst
from .pipe import pipe
from .retry import RetryPolicy, retry

__all__ = (
    # Guard
    "Condition",
    "DEFAULT_MESSAGE",
    "must",
    "preconditions",
    # Loop
    "whilst",
    "do_whilst",
    "times",
    # Pipe
    "pipe",
    # Retry
    "RetryPolicy",
    "retry",
)
