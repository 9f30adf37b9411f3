import threading

import pytest
import requests

from deploy_board_sweep.board_api import MAX_CARDS_PER_PAGE
from deploy_board_sweep.config import Config
from deploy_board_sweep.errors import RemoteError
from deploy_board_sweep.models import Card


class FakeResponse:
    def __init__(self, status_code=200, payload=None, json_error=False):
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeBoard:
    """In-memory stand-in for ProjectBoardAPI.

    ``columns`` maps column id -> list of card dicts in API order.
    ``statuses`` maps card id -> status code (or exception) for mutations.
    """

    def __init__(self, projects=None, project_columns=None, columns=None,
                 statuses=None, page_status=200):
        self.projects = projects or []
        self.project_columns = project_columns or {}
        self.columns = columns or {}
        self.statuses = statuses or {}
        self.page_status = page_status
        self.page_calls = []
        self.moves = []
        self.archives = []
        self._lock = threading.Lock()

    def list_projects(self):
        return list(self.projects)

    def list_columns(self, project_id):
        return list(self.project_columns.get(project_id, []))

    def get_card_page(self, column_id, page):
        self.page_calls.append((column_id, page))
        if self.page_status >= 400:
            raise RemoteError("page failed", status_code=self.page_status)
        cards = self.columns.get(column_id, [])
        start = (page - 1) * MAX_CARDS_PER_PAGE
        return cards[start:start + MAX_CARDS_PER_PAGE]

    def _respond(self, card_id):
        status = self.statuses.get(card_id, 200)
        if isinstance(status, Exception):
            raise status
        return FakeResponse(status)

    def move_card(self, card_id, column_id):
        with self._lock:
            self.moves.append((card_id, column_id))
        return self._respond(card_id)

    def archive_card(self, card_id):
        with self._lock:
            self.archives.append(card_id)
        return self._respond(card_id)

    @property
    def mutation_count(self):
        return len(self.moves) + len(self.archives)


def make_cards(count, start=1):
    return [Card(id=i) for i in range(start, start + count)]


def card_dicts(count, start=1):
    return [{'id': i, 'archived': False, 'note': f'card {i}'}
            for i in range(start, start + count)]


@pytest.fixture
def config():
    return Config(
        project_name='Board',
        done_column_name='Done',
        qa_column_name='QA',
        done_column_card_limit='3',
        token='secret',
        owner='rubyforgood',
        repo='casa',
        max_workers=1,
    )


@pytest.fixture
def no_sleep(monkeypatch):
    """Record throttling sleeps instead of waiting."""
    sleeps = []
    monkeypatch.setattr('deploy_board_sweep.batch.time.sleep', sleeps.append)
    return sleeps


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
