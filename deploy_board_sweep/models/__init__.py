"""Data models for the board sweep."""

from deploy_board_sweep.models.enums import CardOutcome
from deploy_board_sweep.models.board import Project, Column, Card
from deploy_board_sweep.models.batch_result import BatchResult

__all__ = [
    "CardOutcome",
    "Project",
    "Column",
    "Card",
    "BatchResult",
]
