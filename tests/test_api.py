"""Tests for the HTTP API."""

import json

import pytest
from fastapi.testclient import TestClient

from cryptograms.core.config import get_settings
from cryptograms.main import create_app
from cryptograms.models.schemas import Length

PREFIX = "/api/v1"


@pytest.fixture
def app_env(tmp_path, monkeypatch):
    """Environment for an app on a throwaway database; settings reread per test."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    monkeypatch.setenv("MAX_PLAINTEXT_LENGTH", "200")
    get_settings.cache_clear()

    yield monkeypatch

    get_settings.cache_clear()


@pytest.fixture
def client(app_env):
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def puzzle_client(app_env, tmp_path):
    """App whose words hold one puzzle and whose quotes fit no length bucket."""
    words = tmp_path / "words.txt"
    words.write_text("send\nmore\nmoney\n", encoding="utf-8")
    quotes = tmp_path / "quotes.json"
    quotes.write_text(json.dumps([{"quote": "Too short.", "author": "Nobody"}]), encoding="utf-8")

    app_env.setenv("WORDS_FILE", str(words))
    app_env.setenv("QUOTES_FILE", str(quotes))
    get_settings.cache_clear()

    with TestClient(create_app()) as test_client:
        yield test_client


def create(client, **body):
    return client.post(f"{PREFIX}/cryptograms", json=body)


class TestVersion:
    def test_version(self, client):
        response = client.get(f"{PREFIX}/version")
        assert response.status_code == 200
        assert response.json() == {"api_version": "0.1"}


class TestCreateCryptogram:
    """Test POST /cryptograms."""

    def test_identity_round_trip(self, client):
        response = create(client, plaintext="Hello, World!")
        assert response.status_code == 200

        data = response.json()
        assert data["ciphertext"] == "Hello, World!"
        assert data["cipher_type"] == "identity"
        assert data["author"] is None

        answer = client.get(f"{PREFIX}/cryptograms/{data['token']}/answer")
        assert answer.status_code == 200
        assert answer.json() == {"plaintext": "Hello, World!", "key": None}

    def test_quote_of_requested_length(self, client):
        response = create(client, length="short", cipher_type="rot13")
        assert response.status_code == 200
        data = response.json()
        assert data["length"] == "short"
        assert data["author"]

        answer = client.get(f"{PREFIX}/cryptograms/{data['token']}/answer").json()
        start, end = Length.SHORT.bounds
        assert start <= len(answer["plaintext"].encode("utf-8")) < end
        assert answer["key"] is None

    def test_porta_known_answer(self, client):
        data = create(client, plaintext="abno", cipher_type="porta", key="cd").json()
        assert data["ciphertext"] == "opma"

        answer = client.get(f"{PREFIX}/cryptograms/{data['token']}/answer").json()
        assert answer == {"plaintext": "abno", "key": "cd"}

    def test_caesar_answer_holds_shift(self, client):
        data = create(client, plaintext="abc", cipher_type="caesar").json()
        answer = client.get(f"{PREFIX}/cryptograms/{data['token']}/answer").json()

        shift = int(answer["key"])
        assert 1 <= shift <= 25
        assert data["ciphertext"] == "".join(
            chr((ord(c) - ord("a") + shift) % 26 + ord("a")) for c in "abc"
        )

    def test_tokens_are_unique(self, client):
        tokens = {create(client, plaintext="same").json()["token"] for _ in range(5)}
        assert len(tokens) == 5

    def test_hill_bad_key(self, client):
        response = create(client, plaintext="hello", cipher_type="hill", key="abc")
        assert response.status_code == 400
        assert response.json()["detail"] == "KeyError: Key length must be a perfect square"

    def test_plaintext_too_long(self, client):
        response = create(client, plaintext="a" * 201)
        assert response.status_code == 400

    def test_invalid_cipher_type(self, client):
        response = create(client, plaintext="hello", cipher_type="enigma")
        assert response.status_code == 422

    def test_empty_plaintext_rejected(self, client):
        response = create(client, plaintext="")
        assert response.status_code == 422


class TestAnswer:
    def test_unknown_token(self, client):
        response = client.get(f"{PREFIX}/cryptograms/nope/answer")
        assert response.status_code == 404


class TestCryptarithm:
    def test_puzzle_is_stored_as_the_answer(self, puzzle_client):
        response = create(puzzle_client, cipher_type="cryptarithm")
        assert response.status_code == 200

        data = response.json()
        assert data["ciphertext"] in ("send + more = money", "more + send = money")
        assert data["author"] is None

        answer = puzzle_client.get(f"{PREFIX}/cryptograms/{data['token']}/answer").json()
        assert answer["plaintext"] == data["ciphertext"]
        assert answer["key"] in ("9567 + 1085 = 10652", "1085 + 9567 = 10652")

    def test_quote_lengths_do_not_matter(self, puzzle_client):
        assert create(puzzle_client, length="long", cipher_type="rot13").status_code == 503
        assert create(puzzle_client, length="long", cipher_type="cryptarithm").status_code == 200
