"""BaseViewModel: subscription bookkeeping shared by the view models.

Subscriptions made through :meth:`subscribe_event` are cancelled together by
:meth:`dispose`, which the owning view calls when it is torn down.
"""

from __future__ import annotations

from typing import Callable, Type

from filePreview.events.bus import EventBus, Subscription


class BaseViewModel:

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []
        self._disposed = False

    def subscribe_event(
        self,
        event_bus: EventBus,
        event_type: Type,
        handler: Callable,
    ) -> Subscription:
        """Subscribe to an event type and track the subscription."""
        sub = event_bus.subscribe(event_type, handler)
        self._subscriptions.append(sub)
        return sub

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Cancel all tracked event subscriptions."""
        for sub in self._subscriptions:
            sub.cancel()
        self._subscriptions.clear()
        self._disposed = True
