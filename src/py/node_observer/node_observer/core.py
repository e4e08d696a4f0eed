from typing import Callable, Iterable, Optional
from typing_extensions import override
import logging

logger = logging.getLogger(__name__)


class NodeObserverError(Exception):
    """Base class for errors raised by the navigator."""


class InvalidArgumentError(NodeObserverError, ValueError):
    """Signals a missing or malformed argument to a navigator call."""


class NavigationError(NodeObserverError, RuntimeError):
    """Signals that a listener failed while a traversal was in progress.

    The traversal is aborted at the failing element; the listener's exception
    is kept as ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, value: int, index: int, cause: BaseException) -> None:
        super().__init__(value, index, cause)
        self.value = value
        self.index = index
        self.cause = cause

    def __str__(self) -> str:
        return f"Error occurred during navigation: {self.cause}"


class INavigationListener:
    def on_visit(self, value: int) -> None:
        """
        Called once for every value visited by a navigator.
        """
        raise NotImplementedError


class CallbackListener(INavigationListener):
    """Adapts a plain callable into a listener."""

    def __init__(self, callback: Callable[[int], None]) -> None:
        if not callable(callback):
            raise InvalidArgumentError("Callback must be callable")
        self.callback = callback

    @override
    def on_visit(self, value: int) -> None:
        self.callback(value)


class NodeNavigator:
    def __init__(self, values: Optional[Iterable[int]]) -> None:
        if values is None:
            raise InvalidArgumentError("Sequence cannot be None")
        if isinstance(values, (str, bytes, bytearray, memoryview)):
            raise InvalidArgumentError(
                f"Sequence must contain integers, got {type(values).__name__}"
            )

        try:
            stored = tuple(values)
        except TypeError as exc:
            raise InvalidArgumentError(
                f"Sequence must be iterable, got {type(values).__name__}"
            ) from exc
        for value in stored:
            if not isinstance(value, int):
                raise InvalidArgumentError(
                    f"Sequence must contain integers, got {type(value).__name__}"
                )
        self._values: tuple[int, ...] = stored
        self._listener: Optional[INavigationListener] = None

    def subscribe(self, listener: INavigationListener) -> None:
        """
        Make ``listener`` the current listener, replacing any previous one.
        """
        if listener is None:
            raise InvalidArgumentError("Listener cannot be None")
        if not callable(getattr(listener, "on_visit", None)):
            raise InvalidArgumentError(
                f"Listener must define on_visit(), got {type(listener).__name__}"
            )
        logger.debug("Subscribed %r (replacing %r).", listener, self._listener)
        self._listener = listener

    def unsubscribe(self) -> None:
        if self._listener is not None:
            logger.debug("Unsubscribed %r.", self._listener)
        self._listener = None

    def get_listener(self) -> Optional[INavigationListener]:
        return self._listener

    def values(self) -> tuple[int, ...]:
        return self._values

    def size(self) -> int:
        return len(self._values)

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def navigate(self) -> None:
        """
        Visit every stored value in order, notifying the current listener.

        The listener slot is read before each value, so changes made during
        a traversal apply from the next value on.
        """
        logger.debug("Navigating %d values.", len(self._values))
        for index, value in enumerate(self._values):
            listener = self._listener
            if listener is None:
                continue
            try:
                listener.on_visit(value)
            except Exception as exc:
                logger.exception(
                    "Listener failed at index %d (value %d).", index, value
                )
                raise NavigationError(value, index, exc) from exc
        logger.debug("Navigation finished.")

    def describe(self) -> str:
        return "NodeNavigator(size={}, has_listener={}, data={})".format(
            len(self._values),
            self._listener is not None,
            list(self._values),
        )

    def __repr__(self) -> str:
        return self.describe()
