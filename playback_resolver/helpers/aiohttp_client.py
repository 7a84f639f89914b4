"""Helpers for setting up a aiohttp session (and related)."""

from __future__ import annotations

import sys
from functools import cache
from importlib.metadata import PackageNotFoundError, version
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import aiohttp
from aiohttp.hdrs import USER_AGENT

from playback_resolver.constants import APPLICATION_NAME

from .json import json_dumps, json_loads

if TYPE_CHECKING:
    from aiohttp.typedefs import JSONDecoder


MAXIMUM_CONNECTIONS = 100
MAXIMUM_CONNECTIONS_PER_HOST = 10


@cache
def get_package_version() -> str:
    """Return the installed version of this package."""
    try:
        return version("playback-resolver")
    except PackageNotFoundError:
        return "0.0.0"


def create_clientsession(verify_ssl: bool = True, **kwargs: Any) -> aiohttp.ClientSession:
    """Create a new ClientSession with kwargs, i.e. for cookies."""
    clientsession = aiohttp.ClientSession(
        connector=_get_connector(verify_ssl),
        json_serialize=json_dumps,
        response_class=ResolverClientResponse,
        **kwargs,
    )
    # Prevent packages accidentally overriding our default headers
    # If a server requires a different user agent, override it by passing a headers
    # dictionary to the request method.
    user_agent = (
        f"{APPLICATION_NAME}/{get_package_version()} "
        f"aiohttp/{aiohttp.__version__} Python/{sys.version_info[0]}.{sys.version_info[1]}"
    )
    clientsession._default_headers = MappingProxyType(  # type: ignore[assignment]
        {USER_AGENT: user_agent},
    )
    return clientsession


class ResolverClientResponse(aiohttp.ClientResponse):
    """aiohttp.ClientResponse with a json method that uses json_loads by default."""

    async def json(
        self,
        *args: Any,
        loads: JSONDecoder = json_loads,
        **kwargs: Any,
    ) -> Any:
        """Send a json request and parse the json response."""
        return await super().json(*args, loads=loads, **kwargs)


def _get_connector(verify_ssl: bool = True) -> aiohttp.BaseConnector:
    """
    Return the connector pool for aiohttp.

    This method must be run in the event loop.
    """
    return aiohttp.TCPConnector(
        ssl=verify_ssl,
        limit=MAXIMUM_CONNECTIONS,
        limit_per_host=MAXIMUM_CONNECTIONS_PER_HOST,
    )
