# sympla_bot/formatting.py
from typing import Iterable, Optional

from .models import Event

HEADER = "#BOT DEVS OF LATIN\n\n"
UNAVAILABLE_NOTICE = "Ops... Looks like the service is unavailable at the moment :("
EVENTS_LABEL = "Events:\n\n"
DIVIDER = "----------------------------------------\n\n"


def event_to_text(ev: Event) -> str:
    return (
        f"- {ev.name}\n"
        f"  Local: {ev.location.city}\n"
        f"  Data: {ev.start_date_formats.pt}\n"
        f"  URL: {ev.url}\n\n"
    )


def format_events_message(events: Optional[Iterable[Event]]) -> str:
    """
    Lista vazia (ou None) -> cabeçalho + aviso de indisponibilidade.
    Caso contrário, um bloco por evento, na ordem recebida da API.
    """
    events = list(events or [])
    if not events:
        return HEADER + UNAVAILABLE_NOTICE

    parts = [HEADER, EVENTS_LABEL]
    for ev in events:
        parts.append(event_to_text(ev))
        parts.append(DIVIDER)
    return "".join(parts)
