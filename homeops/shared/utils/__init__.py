"""Shared utilities: datetime, generators, template interpolation."""

from homeops.shared.utils.datetime import ensure_utc, utc_now
from homeops.shared.utils.generators import generate_cuid
from homeops.shared.utils.templating import interpolate

__all__ = [
    "generate_cuid",
    "utc_now",
    "ensure_utc",
    "interpolate",
]
