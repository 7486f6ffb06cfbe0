"""Extension layer — hook plugins via pluggy.

Discovery: entry_points (pip-installed) in the ``ooplab.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from ooplab.plugins.manager import PluginManager

__all__ = ["PluginManager"]
