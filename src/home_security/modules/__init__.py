"""
Modules package for home-security.

Modules add behavior on top of the core sensor store.
"""

from home_security.modules.base import StatusListener, EventBusStatusListener

__all__ = ["StatusListener", "EventBusStatusListener"]
