from unittest.mock import MagicMock

import pytest
import requests

from conftest import FakeResponse
from deploy_board_sweep.board_api import MAX_CARDS_PER_PAGE, ProjectBoardAPI
from deploy_board_sweep.errors import (
    DataError, NetworkError, RemoteError, ValidationError,
)


@pytest.fixture
def session():
    s = MagicMock()
    s.headers = {}
    s.request.return_value = FakeResponse(200, [])
    return s


@pytest.fixture
def api(session):
    return ProjectBoardAPI('secret', 'rubyforgood', 'casa', session=session)


class TestProjectBoardAPI:

    def test_sets_auth_headers(self, api, session):
        assert session.headers['Authorization'] == 'token secret'
        assert 'github' in session.headers['Accept']

    def test_list_projects(self, api, session):
        session.request.return_value = FakeResponse(200, [{'id': 1}])
        assert api.list_projects() == [{'id': 1}]
        session.request.assert_called_once_with(
            'GET', 'https://api.github.com/repos/rubyforgood/casa/projects',
            timeout=30, params=None)

    def test_list_columns_non_success_status(self, api, session):
        session.request.return_value = FakeResponse(404, {'message': 'x'})
        with pytest.raises(RemoteError) as excinfo:
            api.list_columns(3)
        assert excinfo.value.status_code == 404
        assert 'status:404' in str(excinfo.value)

    def test_list_accepts_redirect_statuses(self, api, session):
        session.request.return_value = FakeResponse(304, [])
        assert api.list_columns(3) == []

    def test_list_rejects_non_list_body(self, api, session):
        session.request.return_value = FakeResponse(200, {'id': 1})
        with pytest.raises(DataError):
            api.list_projects()

    def test_list_rejects_invalid_json(self, api, session):
        session.request.return_value = FakeResponse(200, json_error=True)
        with pytest.raises(DataError):
            api.list_projects()

    def test_transport_failure_is_network_error(self, api, session):
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(NetworkError):
            api.list_projects()

    def test_get_card_page_params(self, api, session):
        api.get_card_page(8, 2)
        _, kwargs = session.request.call_args
        assert session.request.call_args[0] == (
            'GET', 'https://api.github.com/projects/columns/8/cards')
        assert kwargs['params'] == {
            'archived_state': 'not_archived',
            'page': 2,
            'per_page': MAX_CARDS_PER_PAGE,
        }

    @pytest.mark.parametrize("column_id,page", [(0, 1), (8, 0), (8, 1.0),
                                                ("8", 1)])
    def test_get_card_page_validates(self, api, session, column_id, page):
        with pytest.raises(ValidationError):
            api.get_card_page(column_id, page)
        session.request.assert_not_called()

    def test_move_card_to_top(self, api, session):
        session.request.return_value = FakeResponse(201)
        resp = api.move_card(12, 4)
        assert resp.status_code == 201
        session.request.assert_called_once_with(
            'POST', 'https://api.github.com/projects/columns/cards/12/moves',
            timeout=30, json={'column_id': 4, 'position': 'top'})

    def test_mutations_return_failed_responses(self, api, session):
        session.request.return_value = FakeResponse(422)
        assert api.archive_card(12).status_code == 422

    def test_archive_card(self, api, session):
        api.archive_card(12)
        session.request.assert_called_once_with(
            'PATCH', 'https://api.github.com/projects/columns/cards/12',
            timeout=30, json={'archived': True})

    @pytest.mark.parametrize("card_id", [0, -2, 3.5])
    def test_mutations_validate_card_id(self, api, session, card_id):
        with pytest.raises(ValidationError):
            api.archive_card(card_id)
        with pytest.raises(ValidationError):
            api.move_card(card_id, 4)
        session.request.assert_not_called()

    def test_custom_base_url(self, session):
        api = ProjectBoardAPI('t', 'o', 'r', base_url='https://ghe.local/api/v3/',
                              session=session)
        api.list_columns(1)
        assert session.request.call_args[0][1] == \
            'https://ghe.local/api/v3/projects/1/columns'

    def test_debug_output(self, session, capsys):
        api = ProjectBoardAPI('t', 'o', 'r', session=session, debug=True)
        api.list_columns(1)
        assert '[BOARD] GET' in capsys.readouterr().out
