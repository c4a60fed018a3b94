"""In-process publish/subscribe for gallery notifications."""

import logging
import threading
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Type


@dataclass(kw_only=True)
class Event:
    """Base class for everything published on the bus."""
    timestamp: datetime = field(default_factory=datetime.now)
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class Subscription:
    """Token handed back by :meth:`EventBus.subscribe`."""
    event_type: Type[Event]
    handler: Callable[[Event], None]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class EventBus:
    """Synchronous dispatcher keyed by event class.

    Handlers run on the publishing thread in subscription order. A handler
    registered for a base class also receives its subclasses, so listening
    to :class:`Event` observes everything.
    """

    def __init__(self, logger: logging.Logger = None):
        self._logger = logger or logging.getLogger(__name__)
        self._by_type: Dict[Type[Event], List[Subscription]] = defaultdict(list)
        self._lock = threading.Lock()

    def subscribe(self, event_type: Type[Event], handler: Callable) -> Subscription:
        subscription = Subscription(event_type, handler)
        with self._lock:
            self._by_type[event_type].append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        subscription.cancel()
        with self._lock:
            bucket = self._by_type.get(subscription.event_type)
            if bucket and subscription in bucket:
                bucket.remove(subscription)

    def publish(self, event: Event) -> None:
        with self._lock:
            targets = [
                sub
                for cls in type(event).__mro__
                for sub in self._by_type.get(cls, ())
            ]
        for sub in targets:
            if not sub.active:
                continue
            try:
                sub.handler(event)
            except Exception:
                self._logger.exception("%s handler raised", type(event).__name__)

    def subscriber_count(self, event_type: Type[Event]) -> int:
        with self._lock:
            return sum(sub.active for sub in self._by_type.get(event_type, ()))
