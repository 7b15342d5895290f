"""
LightEvents Frontends
Input bridges that feed a window toolkit's events into an EventBus.

Every bridge has the same interface:
- __init__(bus, sender=None)
- translate(native_event) -> Event or None
- pump() -> number of events published
"""

# Note: Don't import bridges here to avoid importing pygame
# when it might not be needed. Import directly instead.
