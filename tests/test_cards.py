import pytest

from conftest import FakeBoard, card_dicts
from deploy_board_sweep.cards import list_column_cards
from deploy_board_sweep.errors import DataError, RemoteError, ValidationError


def test_concatenates_pages_until_short_page():
    board = FakeBoard(columns={5: card_dicts(250)})
    cards = list_column_cards(board, 5)
    assert len(cards) == 250
    assert [c.id for c in cards] == list(range(1, 251))
    assert board.page_calls == [(5, 1), (5, 2), (5, 3)]


def test_exact_multiple_of_page_size_needs_an_empty_page():
    board = FakeBoard(columns={5: card_dicts(200)})
    assert len(list_column_cards(board, 5)) == 200
    assert board.page_calls == [(5, 1), (5, 2), (5, 3)]


def test_empty_column():
    board = FakeBoard(columns={5: []})
    assert list_column_cards(board, 5) == []
    assert board.page_calls == [(5, 1)]


def test_keeps_card_fields():
    board = FakeBoard(columns={5: [{'id': 11, 'archived': False,
                                    'note': 'fix login'}]})
    card = list_column_cards(board, 5)[0]
    assert card.id == 11
    assert card.archived is False
    assert card.note == 'fix login'


@pytest.mark.parametrize("column_id", [0, -3, 2.5, "5", None])
def test_invalid_column_id_fails_before_fetching(column_id):
    board = FakeBoard()
    with pytest.raises(ValidationError):
        list_column_cards(board, column_id)
    assert board.page_calls == []


def test_page_failure_propagates():
    board = FakeBoard(columns={5: card_dicts(10)}, page_status=502)
    with pytest.raises(RemoteError):
        list_column_cards(board, 5)


def test_card_without_id_is_a_data_error():
    board = FakeBoard(columns={5: [{'archived': False}]})
    with pytest.raises(DataError):
        list_column_cards(board, 5)
