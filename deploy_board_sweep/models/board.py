"""Project, Column and Card dataclasses built from board API JSON."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from deploy_board_sweep.errors import DataError


def _required_id(data: Dict[str, Any], kind: str) -> int:
    if not isinstance(data, dict):
        raise DataError(f"{kind} entry is not an object: {data!r}")
    value = data.get('id')
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise DataError(f"{kind} entry has no valid id: {data!r}")
    return value


@dataclass
class Project:
    id: int
    name: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Project':
        return cls(id=_required_id(data, 'Project'),
                   name=str(data.get('name', '')))


@dataclass
class Column:
    id: int
    name: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Column':
        return cls(id=_required_id(data, 'Column'),
                   name=str(data.get('name', '')))


@dataclass
class Card:
    id: int
    archived: bool = False
    note: Optional[str] = None
    content_url: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Card':
        return cls(
            id=_required_id(data, 'Card'),
            archived=bool(data.get('archived', False)),
            note=data.get('note'),
            content_url=data.get('content_url'),
        )
