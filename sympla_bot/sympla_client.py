# sympla_bot/sympla_client.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from .config import SERVICE_FUTURE, SERVICE_PAST, SearchConfig
from .models import Event, ListingMode

log = logging.getLogger(__name__)

# -------------------- errors --------------------

class SymplaError(Exception):
    """Base de todos os erros ao buscar eventos na Sympla."""


class SymplaConnectionError(SymplaError):
    pass


class SymplaReadError(SymplaError):
    pass


class SymplaStatusError(SymplaError):
    def __init__(self, status_code: int, message: str = ""):
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code


class SymplaDecodeError(SymplaError):
    pass

# -------------------- query --------------------

def service_for(mode: ListingMode) -> str:
    return SERVICE_PAST if ListingMode(mode) is ListingMode.PAST else SERVICE_FUTURE


def build_query(mode: ListingMode, config: SearchConfig) -> Dict[str, Any]:
    """
    Monta o envelope JSON que a API de busca da Sympla espera.
    """
    return {
        "service": service_for(mode),
        "params": {
            "only": config.only,
            "organizer_id": list(config.organizer_ids),
            "sort": config.sort,
            "order_by": config.order_by,
            "limit": config.limit,
            "page": config.page,
        },
        "ignoreLocation": config.ignore_location,
    }


def parse_events(body: bytes) -> List[Event]:
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise SymplaDecodeError(f"invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise SymplaDecodeError("response is not a JSON object")

    data = payload.get("data")
    if data is None:
        return []
    if not isinstance(data, list):
        raise SymplaDecodeError("'data' is not an array")

    events: List[Event] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise SymplaDecodeError(f"data[{i}] is not an object")
        events.append(Event.from_dict(item))
    return events

# -------------------- fetch --------------------

def new_client(config: SearchConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=config.timeout,
        limits=httpx.Limits(max_connections=5, max_keepalive_connections=2),
        transport=transport,
    )


async def fetch_events(mode: ListingMode, client: httpx.AsyncClient, config: SearchConfig) -> List[Event]:
    """
    Um único POST na API de busca. Sem retry e sem cache.
    Qualquer falha levanta uma subclasse de SymplaError; nunca devolve lista parcial.
    """
    query = build_query(mode, config)
    log.debug("[sympla] POST %s service=%s", config.search_url, query["service"])

    try:
        async with client.stream(
            "POST",
            config.search_url,
            content=json.dumps(query).encode("utf-8"),
            headers={"Content-Type": "application/json"},
        ) as r:
            try:
                body = await r.aread()
            except (httpx.TransportError, httpx.DecodingError) as e:
                raise SymplaReadError(f"reading response body failed: {e}") from e

            if not r.is_success:
                raise SymplaStatusError(r.status_code, f"HTTP {r.status_code} from {config.search_url}")
    except httpx.TransportError as e:
        # inclui ConnectError e timeouts
        raise SymplaConnectionError(f"request to {config.search_url} failed: {e}") from e

    events = parse_events(body)
    log.info("[sympla] %s: %d events", ListingMode(mode).value, len(events))
    return events
