"""Charlotte Telegram Bot."""

import logging

from telegram import Update
from telegram.ext import Application, CommandHandler, MessageHandler, filters

from .config import Config, load_config
from .session import Session, open_session
from .telegram_handlers import (
    SESSION_KEY,
    help_handler,
    message_handler,
    start_handler,
    unauthorized_handler,
)

logger = logging.getLogger(__name__)


class AuthFilter(filters.BaseFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def check_update(self, update: Update) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = update.effective_user
        if user is None:
            return False
        return user.id in self.allowed_users


def create_application(config: Config | None = None, session: Session | None = None) -> Application:
    """Create and configure the Telegram bot application."""
    if config is None:
        config = load_config()

    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to charlotte.conf"
        )

    # Updates are processed one at a time, so the session needs no locking
    app = Application.builder().token(config.telegram_bot_token).concurrent_updates(False).build()
    app.bot_data[SESSION_KEY] = session or open_session(config)

    auth_filter = AuthFilter(config.telegram_allowed_users)

    app.add_handler(CommandHandler("start", start_handler, filters=auth_filter))
    app.add_handler(CommandHandler("help", help_handler, filters=auth_filter))
    app.add_handler(MessageHandler(auth_filter & filters.TEXT & ~filters.COMMAND, message_handler))

    # Add catch-all for unauthorized users if we have an allowlist
    if config.telegram_allowed_users:
        app.add_handler(MessageHandler(~auth_filter & filters.ALL, unauthorized_handler))

    return app


def run_bot(config: Config | None = None):
    """Run the Telegram bot."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    if config is None:
        config = load_config()
    app = create_application(config)

    if config.telegram_allowed_users:
        logger.info(f"Bot authorized for users: {config.telegram_allowed_users}")
    else:
        logger.warning("No TELEGRAM_ALLOWED_USERS configured - bot is open to anyone!")

    logger.info(f"Starting Charlotte Telegram bot with data file {config.data_path()}...")

    app.run_polling(allowed_updates=Update.ALL_TYPES)
