"""Post-deploy board sweep.

When production was deployed within the last 24 hours, moves every card in
the QA column to the top of the Done column, then archives the Done cards
beyond the configured limit.
"""

import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from deploy_board_sweep.batch import archive_cards, move_cards
from deploy_board_sweep.board_api import ProjectBoardAPI
from deploy_board_sweep.cards import list_column_cards
from deploy_board_sweep.config import Config
from deploy_board_sweep.deploy_gate import fetch_deploy_time, is_recent_deploy
from deploy_board_sweep.errors import (
    BoardSweepError, NotFoundError, SweepStepError,
)
from deploy_board_sweep.locator import find_column, find_project
from deploy_board_sweep.models import BatchResult, Column, Project


@dataclass
class SweepReport:
    skipped: bool = False
    deploy_time: Optional[datetime] = None
    qa_total: int = 0
    moved: Optional[BatchResult] = None
    done_total: int = 0
    overflow: int = 0
    archived: Optional[BatchResult] = None


class Sweeper:
    """Runs one sweep against the board described by *config*."""

    def __init__(self, config: Config, api: ProjectBoardAPI,
                 deploy_time_source: Optional[Callable[[], datetime]] = None,
                 now: Optional[Callable[[], datetime]] = None):
        self.config = config
        self.api = api
        self.deploy_time_source = deploy_time_source or (
            lambda: fetch_deploy_time(config.deploy_health_url,
                                      timeout=config.request_timeout))
        self.now = now

    def _fail(self, context: str, exc: Exception):
        print(f"[SWEEP] ERROR: {context}", file=sys.stderr)
        raise SweepStepError(f"{context}: {exc}") from exc

    # -- steps ----------------------------------------------------------------

    def _deploy_time(self) -> datetime:
        try:
            return self.deploy_time_source()
        except BoardSweepError as exc:
            self._fail('Failed to fetch latest deploy time', exc)

    def _project(self) -> Project:
        name = self.config.project_name
        try:
            project = find_project(self.api, name)
            if project is None:
                raise NotFoundError(f'No such project with name "{name}"')
        except BoardSweepError as exc:
            self._fail(f'Failed to find project with name "{name}"', exc)
        return project

    def _column(self, name: str, project: Project) -> Column:
        try:
            column = find_column(self.api, name, project.id)
            if column is None:
                raise NotFoundError(
                    f'Could not find column in project:"{project.name}" '
                    f'with name:"{name}"')
        except BoardSweepError as exc:
            self._fail(f'Failed to find column with name "{name}"', exc)
        return column

    def _cards(self, column: Column, label: str):
        try:
            return list_column_cards(self.api, column.id)
        except BoardSweepError as exc:
            self._fail(f'Failed to fetch {label} card data', exc)

    # -- run ------------------------------------------------------------------

    def run(self) -> SweepReport:
        report = SweepReport()

        report.deploy_time = self._deploy_time()
        now = self.now() if self.now else None
        if not is_recent_deploy(report.deploy_time, now=now):
            print("[SWEEP] No recent deploy")
            report.skipped = True
            return report

        try:
            self.config.validate_names()
        except BoardSweepError as exc:
            self._fail('Invalid board configuration', exc)

        project = self._project()
        done_column = self._column(self.config.done_column_name, project)
        qa_column = self._column(self.config.qa_column_name, project)

        qa_cards = self._cards(qa_column, 'QA')
        report.qa_total = len(qa_cards)
        # literal reversal: last fetched QA card is moved first
        qa_cards.reverse()
        report.moved = move_cards(self.api, qa_cards, done_column.id)
        print(f"[SWEEP] Moved {report.moved.succeeded} of "
              f"{report.qa_total} cards")

        try:
            limit = self.config.card_limit
        except BoardSweepError as exc:
            self._fail('Failed to parse param "done_column_card_limit" as '
                       'an integer', exc)

        done_cards = self._cards(done_column, 'done column')
        report.done_total = len(done_cards)
        report.overflow = max(0, report.done_total - limit)
        report.archived = archive_cards(self.api, done_cards, limit,
                                        max_workers=self.config.max_workers)
        print(f"[SWEEP] Archived {report.archived.succeeded} of "
              f"{report.overflow} cards")

        return report
