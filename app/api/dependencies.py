"""
Shared API dependencies.

Reusable FastAPI dependencies for database access and the clock.
"""

from app.core.clock import Clock, SystemClock


def get_clock() -> Clock:
    """Clock used by every booster endpoint.  Tests override this."""
    return SystemClock()
