# sympla_bot/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

# Sympla API (valores padrão; o ambiente só é lido em load_settings)
SYMPLA_SEARCH_URL = "https://www.sympla.com.br/api/v1/search"
SYMPLA_TIMEOUT = 20.0  # segundos

SERVICE_FUTURE = "/v4/search"
SERVICE_PAST = "/v4/events/past"

# Organizadores cujos eventos o bot lista
ORGANIZER_IDS: Tuple[int, ...] = (3125215, 5478152)
ONLY_FIELDS = "name,images,location,start_date_formats,end_date_formats,url"
PAGE_SIZE = "6"  # a API espera string aqui

# Comandos (texto exato)
CMD_START = "/start"
CMD_AVAILABLE = "/disponíveis"
CMD_CLOSED = "/encerrados"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class SearchConfig:
    """Parâmetros fixos da busca na Sympla; injetável nos testes."""
    search_url: str = SYMPLA_SEARCH_URL
    organizer_ids: Tuple[int, ...] = ORGANIZER_IDS
    only: str = ONLY_FIELDS
    sort: str = "date"
    order_by: str = "desc"
    limit: str = PAGE_SIZE
    page: int = 1
    ignore_location: bool = True
    timeout: float = SYMPLA_TIMEOUT


@dataclass(frozen=True)
class Settings:
    bot_token: Optional[str] = None
    search: SearchConfig = field(default_factory=SearchConfig)
    cmd_start: str = CMD_START
    cmd_available: str = CMD_AVAILABLE
    cmd_closed: str = CMD_CLOSED


def _timeout_from_env() -> float:
    raw = (os.getenv("SYMPLA_TIMEOUT") or "").strip()
    if not raw:
        return SYMPLA_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"SYMPLA_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"SYMPLA_TIMEOUT must be positive, got {raw!r}")
    return value


def load_settings() -> Settings:
    """
    Lê o ambiente no momento da chamada (depois do load_dotenv em run.py),
    não no import. Valores inválidos levantam ConfigError.
    """
    search = SearchConfig(
        search_url=(os.getenv("SYMPLA_SEARCH_URL") or "").strip() or SYMPLA_SEARCH_URL,
        timeout=_timeout_from_env(),
    )
    token = (os.getenv("TELEGRAM_BOT_TOKEN") or "").strip() or None
    return Settings(bot_token=token, search=search)
