# sympla_bot/bot.py
from __future__ import annotations

import logging
from typing import Optional

import httpx
from aiogram import Bot, Dispatcher

from .commands import build_command_router, build_router
from .config import Settings
from .sympla_client import new_client

log = logging.getLogger(__name__)


def build_bot(token: str) -> Bot:
    # texto puro: nomes de eventos podem ter '<' e '&'
    return Bot(token=token)


def build_dispatcher(settings: Settings, client: Optional[httpx.AsyncClient] = None) -> Dispatcher:
    """
    Monta o Dispatcher com o roteador de comandos.
    O cliente HTTP é criado aqui (se não vier de fora) e fechado no shutdown.
    """
    http = client or new_client(settings.search)
    commands = build_command_router(settings, http)

    dp = Dispatcher()
    dp.include_router(build_router(commands))

    async def on_startup(*_, **__):
        log.info("[bot] commands: %s", ", ".join(commands.commands()))

    async def on_shutdown(*_, **__):
        await http.aclose()
        log.info("[bot] http client closed")

    dp.startup.register(on_startup)
    dp.shutdown.register(on_shutdown)
    return dp
