"""
Multi-subscriber notification hooks.

Each hook keeps an ordered list of callbacks. Firing a hook calls every
subscriber synchronously, in subscription order, on the caller's thread.
"""

"""
Copyright (c) 2025 Firefly Software Solutions Inc.

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at:

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import threading
from typing import Any, Callable, List


class EventHook:
    """An ordered list of subscriber callbacks for one kind of notification."""

    def __init__(self, name: str):
        self.name = name
        self._subscribers: List[Callable[..., Any]] = []
        self._lock = threading.Lock()

    def subscribe(self, callback: Callable[..., Any]) -> Callable[..., Any]:
        """
        Add a subscriber.

        The same callable may be subscribed more than once; it is then invoked
        once per subscription. Returns the callback so this can be used as a
        decorator.
        """
        if not callable(callback):
            raise TypeError(f"Subscriber for '{self.name}' must be callable")
        with self._lock:
            self._subscribers.append(callback)
        return callback

    def unsubscribe(self, callback: Callable[..., Any]) -> bool:
        """Remove the earliest subscription of a callback. Returns False if absent."""
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                return False
        return True

    def fire(self, *args: Any) -> None:
        """Invoke every subscriber with the given arguments."""
        # Snapshot so subscribers may (un)subscribe while being notified
        for callback in self.subscribers:
            callback(*args)

    @property
    def subscribers(self) -> List[Callable[..., Any]]:
        with self._lock:
            return list(self._subscribers)

    def __iadd__(self, callback: Callable[..., Any]) -> "EventHook":
        self.subscribe(callback)
        return self

    def __isub__(self, callback: Callable[..., Any]) -> "EventHook":
        self.unsubscribe(callback)
        return self

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"EventHook(name={self.name!r}, subscribers={len(self)})"
