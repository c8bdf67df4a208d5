"""Per-element identifier generation."""
from __future__ import annotations

import hashlib
import random
import time

__all__ = ["generate_element_id"]


def generate_element_id(element_type: str, project_name: str = "css_creator") -> str:
    """Return ``<project>_<type>_<md5 hex>`` for a new element instance.

    The digest covers the wall-clock time, a random number and a monotonic
    nanosecond counter, so two calls in the same process do not collide in
    practice. This is not a security token.
    """
    seed = f"{time.time()}{random.randint(1000, 9999)}{time.perf_counter_ns()}"
    digest = hashlib.md5(seed.encode("utf-8"), usedforsecurity=False).hexdigest()
    return f"{project_name}_{element_type}_{digest}"
