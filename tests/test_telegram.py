"""Tests for the Telegram front end."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from charlotte.config import Config
from charlotte.session import Session
from charlotte.telegram_bot import AuthFilter, create_application
from charlotte.telegram_handlers import (
    SESSION_KEY,
    help_handler,
    message_handler,
    start_handler,
)


@pytest.fixture
def session(recording_store):
    return Session(recording_store)


@pytest.fixture
def context(session):
    ctx = MagicMock()
    ctx.bot_data = {SESSION_KEY: session}
    return ctx


def make_update(text="", user_id=42):
    update = MagicMock()
    update.message.text = text
    update.message.reply_text = AsyncMock()
    update.effective_user.id = user_id
    return update


class TestAuthFilter:
    def test_no_allowlist_allows_everyone(self):
        assert AuthFilter([]).check_update(make_update(user_id=1)) is True

    def test_allowlisted_user(self):
        assert AuthFilter([42]).check_update(make_update(user_id=42)) is True

    def test_other_user_rejected(self):
        assert AuthFilter([42]).check_update(make_update(user_id=7)) is False

    def test_no_user_rejected(self):
        update = make_update()
        update.effective_user = None
        assert AuthFilter([42]).check_update(update) is False


class TestHandlers:
    def test_message_runs_command(self, context, session):
        update = make_update("todo read book")

        asyncio.run(message_handler(update, context))

        assert len(session.tasks) == 1
        reply = update.message.reply_text.call_args.args[0]
        assert "[T][ ] read book" in reply

    def test_message_error_is_replied(self, context):
        update = make_update("mark 1")
        asyncio.run(message_handler(update, context))
        assert "invalid" in update.message.reply_text.call_args.args[0]

    def test_bye(self, context):
        update = make_update("bye")
        asyncio.run(message_handler(update, context))
        update.message.reply_text.assert_awaited_once_with("Bye. Hope to see you again soon!")

    def test_start_greets_and_lists_commands(self, context):
        update = make_update("/start")
        asyncio.run(start_handler(update, context))
        reply = update.message.reply_text.call_args.args[0]
        assert reply.startswith("Hello! I'm Charlotte!")
        assert "deadline <description> /by <when>" in reply

    def test_help(self, context):
        update = make_update("/help")
        asyncio.run(help_handler(update, context))
        assert "find <keyword>" in update.message.reply_text.call_args.args[0]


class TestCreateApplication:
    def test_requires_token(self, session):
        with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
            create_application(Config(), session)

    def test_stores_session(self, session):
        app = create_application(Config(telegram_bot_token="123:abc"), session)
        assert app.bot_data[SESSION_KEY] is session
