import argparse
import logging
import sys
from threading import Thread

from habbus.config import WEB_HOST
from habbus.core import Bot
from habbus.environment import Environment
from habbus.logger import LogBuffer, setup_logging
from habbus.repositories import JsonFileGuildConfigRepository
from habbus.services import GuildConfigService
from habbus.web import DiscordOAuthClient, create_app

logger = logging.getLogger("habbus")


def build_web(env, config_service, bot=None, log_buffer=None):
    oauth = DiscordOAuthClient(env.client_id, env.client_secret, env.callback_url)
    return create_app(config_service, bot=bot, oauth=oauth, log_buffer=log_buffer, secret_key=env.secret_key)


def run_web(app, port):
    app.run(host=WEB_HOST, port=port, debug=False, use_reloader=False)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run HabbusBot components")
    parser.add_argument('component', nargs='?', default='all', choices=['bot', 'web', 'all'],
                        help="Component to run")
    args = parser.parse_args(argv)

    log_buffer = LogBuffer()
    setup_logging(log_buffer)

    env = Environment()
    for name in env.validate():
        logger.warning("%s is not set", name)

    config_service = GuildConfigService(JsonFileGuildConfigRepository(env.settings_path))

    if args.component == 'web':
        run_web(build_web(env, config_service, log_buffer=log_buffer), env.port)
        return 0

    if not env.bot_token:
        logger.error("DISCORD_BOT_TOKEN not found.")
        return 1

    bot = Bot(config_service, token=env.bot_token)
    bot.load_cogs()

    if args.component == 'all':
        app = build_web(env, config_service, bot=bot, log_buffer=log_buffer)
        Thread(target=run_web, args=(app, env.port), daemon=True).start()
        logger.info("Dashboard listening on http://localhost:%d", env.port)

    bot.run_bot()
    return 0


if __name__ == "__main__":
    sys.exit(main())
