"""Observer pattern built around a single-listener node navigator.

A ``NodeNavigator`` owns a fixed sequence of integers and notifies at most
one subscribed listener of each value, in order, every time it navigates.
"""

from .core import (
    CallbackListener,
    INavigationListener,
    InvalidArgumentError,
    NavigationError,
    NodeNavigator,
    NodeObserverError,
)
from .listeners import RecordingListener, StatisticsListener, SumListener

__all__ = [
    "NodeObserverError",
    "InvalidArgumentError",
    "NavigationError",
    "INavigationListener",
    "CallbackListener",
    "NodeNavigator",
    "RecordingListener",
    "SumListener",
    "StatisticsListener",
]
