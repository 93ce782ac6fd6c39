"""Boundary parsing of raw inventory-level notifications.

The normalizer is the only stage that sees untyped webhook data. It either
produces a ``ChangeEvent`` or a ``Rejected`` verdict and never raises, so the
orchestrator can treat malformed deliveries as an ordinary skip.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import cast

from skusync.domain.model import ChangeEvent, NormalizedEvent, Rejected

ITEM_ID_KEY = "inventory_item_id"
LOCATION_ID_KEY = "location_id"
QUANTITY_KEY = "available"

type IdentifierFormat = Callable[[str], str]


def keep_identifier(value: str) -> str:
    return value


def _coerce_identifier(value: object) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None


def _coerce_quantity(value: object) -> int | None:
    """Accept any integral number, whether sent as a JSON number or a string.

    ``7``, ``7.0``, ``"7"`` and ``"7.0"`` all give 7; ``7.5`` and ``"7.5"`` are
    rejected.
    """

    # bool is an int subclass and must not pass as a quantity
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def normalize_event(
    payload: object,
    *,
    item_id_format: IdentifierFormat = keep_identifier,
    location_id_format: IdentifierFormat = keep_identifier,
) -> NormalizedEvent:
    """Validate ``payload`` and extract the fields reconciliation needs.

    Zero is a valid quantity. Negative or very large quantities pass through
    unchanged; only missing, null or non-integer values reject the event.
    """

    if not isinstance(payload, Mapping):
        return Rejected(f"payload is not an object ({type(payload).__name__})")
    body = cast(Mapping[str, object], payload)

    missing = [
        key
        for key in (ITEM_ID_KEY, LOCATION_ID_KEY, QUANTITY_KEY)
        if body.get(key) is None
    ]
    if missing:
        return Rejected(f"missing fields: {', '.join(missing)}")

    item_id = _coerce_identifier(body[ITEM_ID_KEY])
    if item_id is None:
        return Rejected(f"invalid {ITEM_ID_KEY}: {body[ITEM_ID_KEY]!r}")
    location_id = _coerce_identifier(body[LOCATION_ID_KEY])
    if location_id is None:
        return Rejected(f"invalid {LOCATION_ID_KEY}: {body[LOCATION_ID_KEY]!r}")
    quantity = _coerce_quantity(body[QUANTITY_KEY])
    if quantity is None:
        return Rejected(f"invalid {QUANTITY_KEY}: {body[QUANTITY_KEY]!r}")

    return ChangeEvent(
        item_id=item_id_format(item_id),
        location_id=location_id_format(location_id),
        new_quantity=quantity,
    )
