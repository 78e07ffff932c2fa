"""Time units defined against the SI second.

Other catalogs follow the same pattern: build each unit with
``make_non_standard`` against units that are themselves standard.
"""

from __future__ import annotations

from unitalgebra.units import from_base_unit, make_non_standard

from .si import second

MINUTE = make_non_standard("minute", "min", 60.0, second)
HOUR = make_non_standard("hour", "h", 3600.0, second)
DAY = make_non_standard("day", "d", 86400.0, second)
WEEK = make_non_standard("week", "wk", 604800.0, second)

BASE_UNITS = (MINUTE, HOUR, DAY, WEEK)

minute = from_base_unit(MINUTE)
hour = from_base_unit(HOUR)
day = from_base_unit(DAY)
week = from_base_unit(WEEK)
