from __future__ import annotations

import itertools
import os
import re
import time

OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")

_process_unique = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))


def new_object_id() -> str:
    """Return a 24 hex character id laid out like a document-store ObjectId.

    The first four bytes are the creation time in seconds, followed by five
    random bytes fixed for the process and a three byte rolling counter.
    """
    timestamp = int(time.time()) & 0xFFFFFFFF
    counter = next(_counter) % 0x1000000
    raw = (
        timestamp.to_bytes(4, "big")
        + _process_unique
        + counter.to_bytes(3, "big")
    )
    return raw.hex()


def is_valid_object_id(value: object) -> bool:
    if not isinstance(value, str):
        return False
    return OBJECT_ID_PATTERN.fullmatch(value) is not None
