# file: dashboard/waqi_search.py

import logging
import requests

from aqifinder import config

def search_stations(keyword: str) :
    """Search WAQI stations by name, keyed by the @uid reference the feed endpoint accepts."""
    keyword = keyword.strip()
    if not keyword :
        return {}
    try:
        response = requests.get(
            f"{config.WAQI_API_BASE_URL}/search/",
            params = {"token" : config.require_api_key(), "keyword" : keyword},
            timeout = config.WAQI_TIMEOUT,
        )
        response.raise_for_status()
        payload = response.json()
    except (requests.RequestException, ValueError) as e:
        logging.error(f"Error searching WAQI stations for '{keyword}': {e}")
        return {}

    if not isinstance(payload, dict) or payload.get("status") != "ok" :
        logging.warning(f"WAQI search returned non-ok status for '{keyword}'")
        return {}

    stations = {}
    for entry in payload.get("data") or [] :
        if not isinstance(entry, dict) or "uid" not in entry :
            continue
        station = entry.get("station") or {}
        try :
            lat, lon = (float(value) for value in station.get("geo") or [0, 0])
        except (TypeError, ValueError) as e :
            logging.warning(f"Skipping WAQI station {entry['uid']} with unusable coordinates: {e}")
            continue
        stations[f"@{entry['uid']}"] = {
            "name" : station.get("name", f"Station {entry['uid']}"),
            "lat" : lat,
            "lon" : lon,
            "aqi" : entry.get("aqi"),
        }
    return stations
