import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from database import init_database
from menu import load_menu

SAMPLE_MENU = {
    "meals": {
        "breakfast": {
            "Monday": ["Poha", "Tea"],
            "Tuesday": ["Idli", "Sambhar"],
        },
        "lunch": {
            "Monday": ["Rice", "Dal"],
            "Tuesday": ["Rajma", "Rice"],
        },
        "high_tea": {
            "Monday": ["Samosa", "Tea"],
        },
        "dinner": {
            "Monday": ["Roti", "Paneer"],
            "Sunday": ["Biryani"],
        },
    }
}


@pytest.fixture
def sample_document():
    return json.dumps(SAMPLE_MENU).encode("utf-8")


@pytest.fixture
def sample_table(sample_document):
    return load_menu(sample_document).table


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "prefs.db")
    init_database(path)
    return path


@pytest.fixture
def make_update():
    def _make(user_id=111, chat_id=555):
        update = MagicMock()
        update.message.reply_text = AsyncMock(return_value=MagicMock(message_id=42))
        update.message.from_user.id = user_id
        update.message.from_user.first_name = "Asha"
        update.effective_chat.id = chat_id
        return update
    return _make


@pytest.fixture
def make_context(sample_document, db_path):
    def _make(args=None, menu=None, owner="999", job_queue=None):
        bot_data = {
            "menu": load_menu(sample_document) if menu is None else menu,
            "db_path": db_path,
            "owner_telegram_id": owner,
            "timezone": "Asia/Kolkata",
        }
        return SimpleNamespace(
            bot_data=bot_data,
            args=args or [],
            job_queue=job_queue,
            bot=MagicMock(edit_message_text=AsyncMock()),
            job=None,
        )
    return _make
