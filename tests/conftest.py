import os
import tempfile

# Keep test logs out of the working tree; must happen before wordle_app is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="wordle-logs-"))

import pytest

from wordle_app import create_app
from wordle_app.config import TestingConfig
from wordle_app.services import game_service as game_service_module
from wordle_app.services.dictionary import WordDictionary
from wordle_app.services.engine import GameEngine
from wordle_app.services.game_service import GameService
from wordle_app.services.word_source import WordSource

WORDS = [
    "house", "homer", "hopes", "horse", "crane", "vivid", "daddy", "baddy",
    "allot", "total", "abbey", "cabin", "eerie", "geese", "spree", "press",
]


@pytest.fixture
def dictionary():
    return WordDictionary(WORDS)


@pytest.fixture
def word_source():
    return WordSource(["crane"], seed=0)


@pytest.fixture
def engine(dictionary, word_source):
    return GameEngine(dictionary.is_valid_word, word_source.random_word)


@pytest.fixture
def service(engine):
    return GameService(engine)


@pytest.fixture
def app(service, monkeypatch):
    monkeypatch.setattr(game_service_module, "_game_service", service)
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()

