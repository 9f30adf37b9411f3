"""deploy-board-sweep: move QA cards to Done after a production deploy and
keep the Done column trimmed to a fixed size."""

from deploy_board_sweep.config import Config
from deploy_board_sweep.errors import (
    BoardSweepError, ValidationError, RemoteError, NetworkError, DataError,
    NotFoundError, SweepStepError,
)
from deploy_board_sweep.models import (
    CardOutcome, Project, Column, Card, BatchResult,
)
from deploy_board_sweep.board_api import ProjectBoardAPI, MAX_CARDS_PER_PAGE
from deploy_board_sweep.http_json import get_json
from deploy_board_sweep.deploy_gate import fetch_deploy_time, is_recent_deploy
from deploy_board_sweep.locator import find_project, find_column
from deploy_board_sweep.cards import list_column_cards
from deploy_board_sweep.batch import move_cards, archive_cards, run_card_batch
from deploy_board_sweep.sweeper import Sweeper, SweepReport
from deploy_board_sweep.cli import main
