"""Telegram command handlers."""

import logging

from telegram import Update
from telegram.ext import ContextTypes

from .workflows import respond

logger = logging.getLogger(__name__)

SESSION_KEY = "interpreter"

HELP_TEXT = (
    "Send me a command as a plain message:\n\n"
    "todo <description>\n"
    "deadline <description> /by <time>\n"
    "event <description> /at <time>\n"
    "list - show all tasks\n"
    "done <n> - mark task n as done\n"
    "delete <n> - remove task n\n"
    "find <text> - search descriptions\n"
    "bye - say goodbye"
)


async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    await update.message.reply_text("Hello! I'm jot, your task tracker.\n\n" + HELP_TEXT)


async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /help command."""
    await update.message.reply_text(HELP_TEXT)


async def command_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle a plain text message as one task command."""
    interpreter = context.bot_data[SESSION_KEY]
    line = update.message.text or ""
    logger.debug(f"Command from user {update.effective_user.id}: {line!r}")
    await update.message.reply_text(respond(interpreter, line))
