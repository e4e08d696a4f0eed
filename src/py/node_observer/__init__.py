"""Observer pattern built around a single-listener node navigator.

The navigator reads its listener slot before every value, so subscribing or
unsubscribing during a traversal applies from the next value on.
"""

from .node_observer import (
    INavigationListener,
    InvalidArgumentError,
    NavigationError,
    NodeNavigator,
)

__all__ = [
    "INavigationListener",
    "InvalidArgumentError",
    "NavigationError",
    "NodeNavigator",
]
