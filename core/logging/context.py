from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import Any, Dict, Iterator

# Each asyncio task gets its own copy, so concurrent commands never see each
# other's channel / riot_id.
_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


@contextmanager
def log_context(**values: Any) -> Iterator[Dict[str, Any]]:
    """Bind ``values`` for the duration of the block, e.g. one chat command."""
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    token = _context.set(current)
    try:
        yield current
    finally:
        _context.reset(token)
