"""Paginated listing of a column's non-archived cards."""

from typing import List

from deploy_board_sweep.board_api import MAX_CARDS_PER_PAGE, ProjectBoardAPI
from deploy_board_sweep.models import Card
from deploy_board_sweep.utils import require_int


def list_column_cards(api: ProjectBoardAPI, column_id: int) -> List[Card]:
    """Return every non-archived card of *column_id* in API order.

    Pages are requested until one comes back with fewer than
    MAX_CARDS_PER_PAGE cards. An error on any page propagates and the pages
    already fetched are discarded.
    """
    require_int(column_id, 'columnId')

    cards: List[Card] = []
    page = 1
    while True:
        card_page = api.get_card_page(column_id, page)
        cards.extend(Card.from_api(c) for c in card_page)
        if len(card_page) < MAX_CARDS_PER_PAGE:
            break
        page += 1
    return cards
