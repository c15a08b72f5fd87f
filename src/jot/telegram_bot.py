"""jot Telegram Bot."""

import logging

from telegram import Update
from telegram.ext import (
    Application,
    CommandHandler,
    MessageHandler,
    filters,
)

from .config import Config, load_config
from .interpreter import CommandInterpreter
from .telegram_handlers import SESSION_KEY, command_handler, help_handler, start_handler
from .workflows import open_session

logger = logging.getLogger(__name__)


class AuthFilter(filters.UpdateFilter):
    """Filter to only allow authorized users."""

    def __init__(self, allowed_users: list[int]):
        super().__init__()
        self.allowed_users = allowed_users

    def filter(self, update: Update) -> bool:
        if not self.allowed_users:
            return True  # No restriction if no users configured
        user = update.effective_user
        if user is None:
            return False
        return user.id in self.allowed_users


async def unauthorized_handler(update: Update, context):
    user = update.effective_user
    logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
    await update.message.reply_text(
        "Unauthorized. This bot is private.\n"
        "If you're the owner, add your Telegram user ID to TELEGRAM_ALLOWED_USERS in jot.conf"
    )


def create_application(
    config: Config | None = None,
    interpreter: CommandInterpreter | None = None,
) -> Application:
    """Create and configure the Telegram bot application."""
    if config is None:
        config = load_config()

    if not config.telegram_bot_token:
        raise ValueError(
            "TELEGRAM_BOT_TOKEN not configured. "
            "Get a token from @BotFather on Telegram and add it to jot.conf"
        )

    # Build application
    app = Application.builder().token(config.telegram_bot_token).build()
    app.bot_data[SESSION_KEY] = interpreter or open_session(config)

    auth_filter = AuthFilter(config.telegram_allowed_users)

    app.add_handler(CommandHandler("start", start_handler, filters=auth_filter))
    app.add_handler(CommandHandler("help", help_handler, filters=auth_filter))
    app.add_handler(
        MessageHandler(auth_filter & filters.TEXT & ~filters.COMMAND, command_handler)
    )

    # Add catch-all for unauthorized users if we have an allowlist
    if config.telegram_allowed_users:
        app.add_handler(
            MessageHandler(~auth_filter & filters.ALL, unauthorized_handler)
        )

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

    logger.info("Starting jot Telegram bot...")

    # Updates are handled one at a time, so commands never interleave.
    app.run_polling(allowed_updates=Update.ALL_TYPES)
