"""Run configuration.

Values come from the GitHub Actions input variables (``INPUT_*``) and the
repository context (``GITHUB_REPOSITORY``), with optional ``.env`` file
support via *python-dotenv*. Everything is gathered into one ``Config``
that is validated once at startup and passed to each component.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from deploy_board_sweep.errors import ValidationError
from deploy_board_sweep.utils import require_int, require_name

DEFAULT_HEALTH_URL = 'https://casavolunteertracking.org/health.json'
DEFAULT_API_URL = 'https://api.github.com'
# explicit per-request timeout (seconds); requests itself would wait forever
DEFAULT_REQUEST_TIMEOUT = 30
# archive pool size; moves always run on one worker
DEFAULT_MAX_WORKERS = 8


@dataclass
class Config:
    project_name: str = ''
    done_column_name: str = ''
    qa_column_name: str = ''
    done_column_card_limit: str = ''
    token: str = ''
    owner: str = ''
    repo: str = ''
    deploy_health_url: str = DEFAULT_HEALTH_URL
    api_url: str = DEFAULT_API_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """Build a Config from the process environment (or *environ*)."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        owner, repo = split_repository(environ.get('GITHUB_REPOSITORY', ''))
        return cls(
            project_name=environ.get('INPUT_PROJECT_NAME', ''),
            done_column_name=environ.get('INPUT_DONE_COLUMN_NAME', ''),
            qa_column_name=environ.get('INPUT_QA_COLUMN_NAME', ''),
            done_column_card_limit=environ.get(
                'INPUT_DONE_COLUMN_CARD_LIMIT', ''),
            token=environ.get('INPUT_TOKEN', ''),
            owner=owner,
            repo=repo,
            deploy_health_url=environ.get('DEPLOY_HEALTH_URL',
                                          DEFAULT_HEALTH_URL),
            api_url=environ.get('GITHUB_API_URL', DEFAULT_API_URL),
            request_timeout=_parse_number(
                environ.get('SWEEP_REQUEST_TIMEOUT'),
                DEFAULT_REQUEST_TIMEOUT, 'SWEEP_REQUEST_TIMEOUT', float),
            max_workers=_parse_number(
                environ.get('SWEEP_MAX_WORKERS'),
                DEFAULT_MAX_WORKERS, 'SWEEP_MAX_WORKERS', int),
        )

    @property
    def card_limit(self) -> int:
        """``done_column_card_limit`` parsed as a non-negative integer."""
        try:
            limit = int(str(self.done_column_card_limit).strip())
        except ValueError:
            raise ValidationError(
                'Failed to parse param "done_column_card_limit" as an '
                f'integer: {self.done_column_card_limit!r}') from None
        return require_int(limit, 'done_column_card_limit', minimum=0)

    def validate_names(self):
        require_name(self.done_column_name, 'done_column_name')
        require_name(self.qa_column_name, 'QA_column_name')
        require_name(self.project_name, 'project_name')

    def validate(self):
        """Check every field, raising ValidationError on the first problem."""
        self.validate_names()
        self.card_limit  # parses or raises
        require_name(self.token, 'token')
        require_name(self.owner, 'repository owner')
        require_name(self.repo, 'repository name')
        require_name(self.deploy_health_url, 'deploy_health_url')
        require_name(self.api_url, 'api_url')
        if self.request_timeout <= 0:
            raise ValidationError('Param request_timeout must be positive')
        require_int(self.max_workers, 'max_workers')


def split_repository(value: str):
    """Split ``owner/repo`` into its parts; empty strings when absent."""
    if not value:
        return '', ''
    owner, sep, repo = value.partition('/')
    if not sep or not owner or not repo or '/' in repo:
        raise ValidationError(
            f"Repository must look like 'owner/repo', got {value!r}")
    return owner, repo


def _parse_number(raw, default, name, kind):
    if raw is None or raw == '':
        return default
    try:
        return kind(raw)
    except ValueError:
        raise ValidationError(f"{name} is not a number: {raw!r}") from None
