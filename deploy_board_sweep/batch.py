"""Throttled batch mutation of cards: move to a column, or archive.

Each card gets exactly one request. Requests are dispatched in list order
onto a bounded thread pool; when the batch is large a fixed delay separates
successive dispatches. A failing card is logged and counted, never allowed
to stop its siblings.
"""

import concurrent.futures
import sys
import time
from typing import Callable, List

import requests

from deploy_board_sweep.board_api import MAX_CARDS_PER_PAGE, ProjectBoardAPI
from deploy_board_sweep.errors import BoardSweepError
from deploy_board_sweep.models import BatchResult, Card, CardOutcome
from deploy_board_sweep.utils import is_mutation_success, require_int

THROTTLE_THRESHOLD = MAX_CARDS_PER_PAGE
THROTTLE_DELAY_SECONDS = 1.0
DEFAULT_MAX_WORKERS = 8


def throttle_delay(batch_size: int) -> float:
    """Seconds to wait between dispatches for a batch of *batch_size*."""
    return THROTTLE_DELAY_SECONDS if batch_size >= THROTTLE_THRESHOLD else 0.0


def _classify(future: concurrent.futures.Future, card: Card, verb: str,
              already_msg: str) -> CardOutcome:
    try:
        resp = future.result()
    except (requests.RequestException, BoardSweepError) as exc:
        print(f"[BATCH] Warning: failed to {verb} card with id: {card.id}",
              file=sys.stderr)
        print(f"  {exc}", file=sys.stderr)
        return CardOutcome.FAILED_ERROR

    status = resp.status_code
    if is_mutation_success(status):
        return CardOutcome.SUCCEEDED
    if status == 304:
        print(f"[BATCH] Card with id:{card.id} {already_msg}")
        return CardOutcome.ALREADY_IN_STATE

    print(f"[BATCH] Warning: failed to {verb} card with id: {card.id}",
          file=sys.stderr)
    print(f"  Request to {verb} card with id:{card.id} has status:{status}",
          file=sys.stderr)
    return CardOutcome.FAILED_STATUS


def run_card_batch(cards: List[Card], mutate: Callable[[Card], requests.Response],
                   verb: str, already_msg: str, throttle_size: int,
                   max_workers: int = DEFAULT_MAX_WORKERS) -> BatchResult:
    """Apply *mutate* to every card and tally the outcomes.

    Returns only once every card has been attempted, so that
    ``result.attempted == result.total`` always holds on return.
    """
    result = BatchResult(total=len(cards))
    if not cards:
        return result

    delay = throttle_delay(throttle_size)
    if delay:
        print(f"[BATCH] A large number of {verb} project card requests "
              f"will be sent. Throttling requests.")

    futures = {}
    with concurrent.futures.ThreadPoolExecutor(
            max_workers=max_workers) as executor:
        for i, card in enumerate(cards):
            if i and delay:
                time.sleep(delay)
            futures[executor.submit(mutate, card)] = card

        # tallied on this thread only
        for future in concurrent.futures.as_completed(futures):
            card = futures[future]
            result.record(card.id, _classify(future, card, verb, already_msg))

    return result


def move_cards(api: ProjectBoardAPI, cards: List[Card],
               column_id: int) -> BatchResult:
    """Move *cards*, in order, to the top of *column_id*.

    Runs on a single worker: each move lands on top of the column, so the
    requests must reach the API in list order.
    """
    require_int(column_id, 'columnId')

    if not cards:
        print("[BATCH] No cards to move")
        return BatchResult()

    return run_card_batch(
        cards, lambda card: api.move_card(card.id, column_id),
        verb='move', already_msg='was already in the column',
        throttle_size=len(cards), max_workers=1)


def archive_cards(api: ProjectBoardAPI, cards: List[Card], limit: int,
                  max_workers: int = DEFAULT_MAX_WORKERS) -> BatchResult:
    """Archive every card past the first *limit* of *cards*.

    Throttling is decided on the size of the whole list, not of the tail.
    """
    require_int(limit, 'limit', minimum=0)

    return run_card_batch(
        cards[limit:], lambda card: api.archive_card(card.id),
        verb='archive', already_msg='was already archived',
        throttle_size=len(cards), max_workers=max_workers)
