"""Simple in-memory rate limiter per client (by client host)."""
import threading
import time

from fastapi import HTTPException

# (client, key) -> (window seconds, timestamps in window)
_store: dict[str, tuple[float, list[float]]] = {}
_lock = threading.Lock()
_last_sweep = 0.0

SWEEP_INTERVAL_SECONDS = 60


def _sweep(now: float) -> None:
    """Drop clients with no request left in their window. Caller holds _lock."""
    idle = [k for k, (window, stamps) in _store.items() if not stamps or stamps[-1] <= now - window]
    for k in idle:
        del _store[k]


def check_rate_limit(
    client_id: str,
    key: str,
    max_per_window: int,
    window_seconds: float = 60,
) -> None:
    """Raise 429 if client has exceeded max_per_window requests in the last window_seconds."""
    global _last_sweep
    now = time.monotonic()
    cutoff = now - window_seconds
    k = f"{client_id}:{key}"
    with _lock:
        if now - _last_sweep >= SWEEP_INTERVAL_SECONDS:
            _sweep(now)
            _last_sweep = now
        _, stamps = _store.get(k, (window_seconds, []))
        stamps = [t for t in stamps if t > cutoff]
        if len(stamps) >= max_per_window:
            if stamps:
                _store[k] = (window_seconds, stamps)
            else:
                _store.pop(k, None)
            raise HTTPException(
                status_code=429,
                detail="Too many requests. Please try again in a minute.",
            )
        stamps.append(now)
        _store[k] = (window_seconds, stamps)


def tracked_clients() -> int:
    with _lock:
        return len(_store)


def reset_rate_limits() -> None:
    global _last_sweep
    with _lock:
        _store.clear()
        _last_sweep = 0.0
