"""Helpers to work with (de)serializing of json."""

from __future__ import annotations

from typing import Any

import orjson


json_loads = orjson.loads


def json_dumps(data: Any) -> str:
    """Dump json string, non-string dict keys allowed."""
    return orjson.dumps(data, option=orjson.OPT_NON_STR_KEYS).decode("utf-8")
