from __future__ import annotations

import random
import re
import string

_LETTERS = string.ascii_uppercase


def vehicle_registration(vehicle_id: str, *, rng: random.Random | None = None) -> str:
    """Plausible West Bengal plate derived from the digits of a vehicle id.

    Ids without digits (or with only zeros) get a random seed from ``rng``.
    """

    digits_raw = re.sub(r"[^0-9]", "", vehicle_id)
    seed = int(digits_raw) if digits_raw else 0
    if not seed:
        seed = (rng or random.Random()).randrange(10000)

    district = f"{seed % 99:02d}"
    a1 = _LETTERS[seed % 26]
    a2 = _LETTERS[(seed * 7) % 26]
    serial = f"{(seed * 13) % 9999:04d}"
    return f"WB {district}{a1}{a2} {serial}"
