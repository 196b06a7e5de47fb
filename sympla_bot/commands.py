# sympla_bot/commands.py
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Dict, List, Optional

import httpx
from aiogram import F, Router
from aiogram.types import Message

from .config import SearchConfig, Settings
from .formatting import format_events_message
from .models import Event, ListingMode
from .sympla_client import SymplaError, fetch_events

log = logging.getLogger(__name__)

FetchFn = Callable[[ListingMode, httpx.AsyncClient, SearchConfig], Awaitable[List[Event]]]

GREETING_TEXT = (
    "Alo! Eu listo os eventos dos Devs of Latin na Sympla.\n\n"
    "{available} — eventos com inscrições abertas\n"
    "{closed} — eventos encerrados"
)
FETCH_ERROR_TEXT = "Ops... não consegui buscar os eventos agora. Tente novamente em alguns minutos."

# --------------------------- handlers ---------------------------

class CommandHandler:
    """Um comando = um objeto com handle(message)."""

    async def handle(self, m: Message) -> None:
        raise NotImplementedError


class GreetingHandler(CommandHandler):
    def __init__(self, text: str):
        self.text = text

    async def handle(self, m: Message) -> None:
        await m.answer(self.text)


class EventsHandler(CommandHandler):
    def __init__(
        self,
        mode: ListingMode,
        client: httpx.AsyncClient,
        config: SearchConfig,
        fetch: FetchFn = fetch_events,
    ):
        self.mode = mode
        self.client = client
        self.config = config
        self.fetch = fetch

    async def handle(self, m: Message) -> None:
        try:
            events = await self.fetch(self.mode, self.client, self.config)
        except SymplaError as e:
            log.warning("[commands] fetch %s failed (%s): %s", self.mode.value, type(e).__name__, e)
            await m.answer(FETCH_ERROR_TEXT)
            return

        await m.answer(format_events_message(events), disable_web_page_preview=True)

# --------------------------- routing ---------------------------

class CommandRouter:
    """
    Despacho por igualdade exata do texto da mensagem.
    Texto sem comando registrado é ignorado em silêncio.
    """

    def __init__(self):
        self._handlers: Dict[str, CommandHandler] = {}

    def register(self, command: str, handler: CommandHandler) -> None:
        if command in self._handlers:
            raise ValueError(f"command already registered: {command}")
        self._handlers[command] = handler

    def commands(self) -> List[str]:
        return list(self._handlers)

    def resolve(self, text: Optional[str]) -> Optional[CommandHandler]:
        if text is None:
            return None
        return self._handlers.get(text)

    async def dispatch(self, m: Message) -> bool:
        if m.chat is None:
            return False
        handler = self.resolve(m.text)
        if handler is None:
            return False
        log.info("[commands] %s from chat=%s", m.text, m.chat.id)
        await handler.handle(m)
        return True


def build_command_router(
    settings: Settings,
    client: httpx.AsyncClient,
    fetch: FetchFn = fetch_events,
) -> CommandRouter:
    commands = CommandRouter()
    greeting = GREETING_TEXT.format(available=settings.cmd_available, closed=settings.cmd_closed)
    commands.register(settings.cmd_start, GreetingHandler(greeting))
    commands.register(
        settings.cmd_available,
        EventsHandler(ListingMode.FUTURE, client, settings.search, fetch),
    )
    commands.register(
        settings.cmd_closed,
        EventsHandler(ListingMode.PAST, client, settings.search, fetch),
    )
    return commands


def build_router(commands: CommandRouter) -> Router:
    router = Router(name="commands")

    @router.message(F.text)
    async def on_text(m: Message):
        await commands.dispatch(m)

    return router
