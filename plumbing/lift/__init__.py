"""
Lift helpers.

Import style:
    from plumbing import lift as L

Architecture:
- L.up.*    - normalizing callables (wrap, settle)
- L.call.*  - composable continuations (then_, catch_) and bind_own

Examples:
    from plumbing import lift as L
    
    fetch = L.wrap(maybe_sync_fetch)
    user = await fetch(42)
    
    outcome = await L.settle(maybe_sync_fetch)(42)()
    
    safe = L.catch_(lambda exc: None)
    user_or_none = await safe(fetch(42))
"""

from __future__ import annotations

# Namespaces (L.up.*, L.call.*)
from . import call, up

# From up namespace - normalizing
from .up import settle, wrap

# From call namespace - continuations
from .call import bind_own, catch_, then_

__all__ = (
    # Namespaces
    "up",
    "call",
    # Up
    "wrap",
    "settle",
    # Call
    "then_",
    "catch_",
    "bind_own",
)
