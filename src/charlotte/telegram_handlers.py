"""Telegram command handlers."""

import logging

from telegram import Update
from telegram.ext import ContextTypes

from .core.parser import USAGE
from .session import Session

logger = logging.getLogger(__name__)

SESSION_KEY = "session"


def get_session(context: ContextTypes.DEFAULT_TYPE) -> Session:
    """The session shared by all chats, stored in bot_data by create_application."""
    return context.bot_data[SESSION_KEY]


def help_text() -> str:
    lines = ["Commands:"]
    lines.extend(f"  {usage}" for usage in USAGE.values())
    return "\n".join(lines)


async def start_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /start command."""
    session = get_session(context)
    await update.message.reply_text(f"{session.greeting()}\n\n{help_text()}")


async def help_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /help command."""
    await update.message.reply_text(help_text())


async def message_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Run a plain text message as a Charlotte command."""
    session = get_session(context)
    reply = session.handle(update.message.text or "")

    if reply.exit and update.effective_user:
        # The bot keeps serving; "bye" only ends the conversation for the user
        logger.info(f"User {update.effective_user.id} said bye")
    await update.message.reply_text(reply.text)


async def unauthorized_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle unauthorized access attempts."""
    user = update.effective_user
    logger.warning(f"Unauthorized access attempt from user {user.id} ({user.username})")
    if update.message:
        await update.message.reply_text(
            "Unauthorized. This bot is private.\n"
            "If you're the owner, add your Telegram user ID to TELEGRAM_ALLOWED_USERS in charlotte.conf"
        )
