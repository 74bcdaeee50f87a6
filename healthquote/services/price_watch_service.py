"""
Price watch service for triggering re-pricing when a quote changes.

A price engine usually only cares that *something* price-relevant changed
and what the new value is. This service subscribes one callback to every
price-affecting attribute path and to the hospital / extras code aliases.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Tuple

from healthquote.core.product_codes import (
    EXTRAS_CODE_EVENT,
    HOSPITAL_CODE_EVENT,
    PRICE_AFFECTING_PROPERTIES,
)
from healthquote.core.quote_model import QuoteModel


logger = logging.getLogger(__name__)

PriceChangeCallback = Callable[[str, Any], None]

PRODUCT_EVENTS: Tuple[str, ...] = (HOSPITAL_CODE_EVENT, EXTRAS_CODE_EVENT)


def price_relevant_events() -> Tuple[str, ...]:
    """Every event name whose emission may change the quoted price."""
    paths = tuple(path for path, flag in PRICE_AFFECTING_PROPERTIES.items() if flag)
    return paths + PRODUCT_EVENTS


def watch_price_changes(model: QuoteModel, callback: PriceChangeCallback) -> Callable[[], None]:
    """
    Call `callback(event_name, value)` whenever a price-relevant event fires.

    Args:
        model: The quote to watch.
        callback: Receives the event name and the new value.

    Returns:
        A function that removes every subscription made here.

    Raises:
        ValueError: If callback is not callable.
    """
    if not callable(callback):
        raise ValueError("callback must be callable")

    subscriptions: List[Tuple[str, Callable[..., None]]] = []

    for event_name in price_relevant_events():
        def _listener(value: Any = None, *_args: Any, _event: str = event_name) -> None:
            logger.debug("Price-relevant change on %s", _event)
            callback(_event, value)

        model.on(event_name, _listener)
        subscriptions.append((event_name, _listener))

    def unsubscribe() -> None:
        for name, listener in subscriptions:
            model.off(name, listener)
        subscriptions.clear()

    return unsubscribe


__all__ = [
    "PRODUCT_EVENTS",
    "PriceChangeCallback",
    "price_relevant_events",
    "watch_price_changes",
]
