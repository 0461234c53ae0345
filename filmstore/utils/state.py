import enum
from typing import Callable, Generic, List, Optional, TypeVar


T = TypeVar("T")


class LoadState(str, enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class StateContainer(Generic[T]):
    """Load state of a single session, observable by the presentation layer.

    Subscribers are called synchronously, in subscription order, after every
    transition. Only the owning session writes to it.
    """

    def __init__(self, data: Optional[T] = None):
        self.status: LoadState = LoadState.IDLE
        self.data: Optional[T] = data
        self.error: Optional[str] = None
        self._subscribers: List[Callable[["StateContainer[T]"], None]] = []

    @property
    def is_loading(self) -> bool:
        return self.status is LoadState.LOADING

    @property
    def is_loaded(self) -> bool:
        return self.status is LoadState.LOADED

    @property
    def is_failed(self) -> bool:
        return self.status is LoadState.FAILED

    def subscribe(self, callback: Callable[["StateContainer[T]"], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_loading(self) -> None:
        self.status = LoadState.LOADING
        self.error = None
        self._notify()

    def set_loaded(self, data: T) -> None:
        self.status = LoadState.LOADED
        self.data = data
        self.error = None
        self._notify()

    def set_failed(self, error: str) -> None:
        self.status = LoadState.FAILED
        self.error = error
        self._notify()

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self)

    def __repr__(self) -> str:
        return f"StateContainer(status={self.status.value}, error={self.error!r})"
