"""Tests for the Telegram surface."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from jot.adapters.text_presenter import TextPresenter
from jot.config import Config
from jot.core.tasks import TaskList
from jot.interpreter import CommandInterpreter
from jot.telegram_bot import AuthFilter, create_application
from jot.telegram_handlers import SESSION_KEY, command_handler, help_handler


@pytest.fixture
def interpreter():
    return CommandInterpreter(TaskList(), MagicMock(), TextPresenter())


def make_update(text: str, user_id: int = 42):
    update = MagicMock()
    update.message.text = text
    update.message.reply_text = AsyncMock()
    update.effective_user.id = user_id
    return update


class TestCommandHandler:
    def test_replies_with_interpreter_output(self, interpreter):
        update = make_update("todo read book")
        context = MagicMock(bot_data={SESSION_KEY: interpreter})

        asyncio.run(command_handler(update, context))

        reply = update.message.reply_text.await_args.args[0]
        assert "read book" in reply
        assert interpreter.tasks.size() == 1

    def test_errors_become_replies(self, interpreter):
        update = make_update("done 3")
        context = MagicMock(bot_data={SESSION_KEY: interpreter})

        asyncio.run(command_handler(update, context))

        assert update.message.reply_text.await_args.args[0].startswith("OOPS!!! ")

    def test_help_lists_commands(self):
        update = make_update("/help")
        asyncio.run(help_handler(update, MagicMock()))
        text = update.message.reply_text.await_args.args[0]
        for keyword in ("todo", "deadline", "event", "list", "done", "delete", "find", "bye"):
            assert keyword in text


class TestAuthFilter:
    def test_open_when_no_users(self):
        assert AuthFilter([]).filter(make_update("x")) is True

    def test_checks_user(self):
        auth = AuthFilter([42])
        assert auth.filter(make_update("x", user_id=42)) is True
        assert auth.filter(make_update("x", user_id=7)) is False


class TestCreateApplication:
    def test_requires_token(self, interpreter):
        with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
            create_application(Config(), interpreter)

    def test_stores_session(self, interpreter):
        app = create_application(Config(telegram_bot_token="123:abc"), interpreter)
        assert app.bot_data[SESSION_KEY] is interpreter
