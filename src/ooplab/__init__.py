"""ooplab — polymorphic shapes, notifiers, and dispatch as a working library."""

import logging

__version__ = "0.3.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
