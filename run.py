# run.py — bootstrap do bot: .env, logging e long polling

import os
import sys
import asyncio
import logging
import contextlib
from pathlib import Path

from aiogram.exceptions import TelegramConflictError
from dotenv import load_dotenv

from sympla_bot.bot import build_bot, build_dispatcher
from sympla_bot.config import ConfigError, Settings, load_settings
from sympla_bot.sympla_client import new_client

log = logging.getLogger("run")

ENV_PATH = Path(__file__).parent / ".env"


def load_env(path: Path = ENV_PATH) -> None:
    """
    .env é opcional (o token pode vir do ambiente), mas se existir
    e não puder ser lido, o processo termina.
    """
    try:
        load_dotenv(dotenv_path=path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Erro ao carregar o arquivo .env: {e}", file=sys.stderr)
        sys.exit(1)


async def main(settings: Settings):
    bot = build_bot(settings.bot_token)
    http = new_client(settings.search)
    try:
        me = await bot.get_me()
        log.info(f"Bot @{me.username} (id={me.id}), Sympla endpoint {settings.search.search_url}")

        # descarta updates pendentes de um webhook antigo
        with contextlib.suppress(Exception):
            await bot.delete_webhook(drop_pending_updates=True)
            log.info("Webhook deleted.")

        dp = build_dispatcher(settings, http)
        try:
            log.info("Starting polling…")
            await dp.start_polling(bot)
        except TelegramConflictError as e:
            log.error(f"Polling conflict (another instance running?): {e}")
            raise
    finally:
        # aclose é idempotente: o shutdown do dispatcher pode já ter fechado
        await http.aclose()
        with contextlib.suppress(Exception):
            await bot.session.close()


def cli():
    load_env()

    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Configuração inválida: {e}", file=sys.stderr)
        sys.exit(1)
    if not settings.bot_token:
        print("Bots token not found: set TELEGRAM_BOT_TOKEN", file=sys.stderr)
        sys.exit(1)

    try:
        asyncio.run(main(settings))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    cli()
