# file: aqifinder/waqi_api.py

import asyncio
import logging
import ssl
from typing import Any, Dict, Optional
from urllib.parse import quote

import aiohttp
import certifi

from aqifinder import config
from aqifinder.exceptions import WAQIRequestError, WAQIResponseError

DEFAULT_ERROR = "Failed to fetch WAQI data"


def feed_url(city: str) -> str:
    """Build the /feed/ URL for a city slug or a WAQI station reference such as @1437."""
    return f"{config.WAQI_API_BASE_URL}/feed/{quote(city, safe='@')}/"


def create_session() -> aiohttp.ClientSession:
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    return aiohttp.ClientSession(
        connector=aiohttp.TCPConnector(ssl=ssl_context),
        timeout=aiohttp.ClientTimeout(total=config.WAQI_TIMEOUT),
    )


async def _get_feed(session: aiohttp.ClientSession, city: str, token: str) -> Dict[str, Any]:
    try:
        async with session.get(feed_url(city), params={"token": token}) as response:
            if not response.ok:
                logging.error(f"WAQI returned HTTP {response.status} for {city}")
                raise WAQIRequestError(DEFAULT_ERROR)
            try:
                payload = await response.json(content_type=None)
            except ValueError as e:
                logging.error(f"WAQI returned a body that is not JSON for {city}: {e}")
                raise WAQIResponseError(DEFAULT_ERROR) from e
    except aiohttp.ClientError as e:
        logging.error(f"Network request to WAQI failed for {city}: {e}")
        raise WAQIRequestError(DEFAULT_ERROR) from e
    except asyncio.TimeoutError as e:
        logging.error(f"WAQI request timed out for {city}")
        raise WAQIRequestError(DEFAULT_ERROR) from e

    if not isinstance(payload, dict) or payload.get("status") != "ok":
        detail = payload.get("data") if isinstance(payload, dict) else None
        message = detail if isinstance(detail, str) and detail else DEFAULT_ERROR
        logging.error(f"WAQI returned non-ok status for {city}: {message}")
        raise WAQIResponseError(message)
    return payload


async def fetch_waqi_feed(city: str, session: Optional[aiohttp.ClientSession] = None) -> Dict[str, Any]:
    """Fetch the current WAQI feed for a city and return the decoded JSON body."""
    token = config.require_api_key()
    if session is not None:
        return await _get_feed(session, city, token)
    async with create_session() as own_session:
        return await _get_feed(own_session, city, token)
