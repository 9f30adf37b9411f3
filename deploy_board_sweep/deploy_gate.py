"""Deploy-time gate: only act when production was deployed recently."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import requests

from deploy_board_sweep.errors import DataError
from deploy_board_sweep.http_json import get_json

# 24 hours * 60 minutes * 60 seconds * 1000 milliseconds
RECENT_DEPLOY_WINDOW_MS = 86400000
RECENT_DEPLOY_WINDOW = timedelta(milliseconds=RECENT_DEPLOY_WINDOW_MS)


def parse_deploy_time(value) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    if not isinstance(value, str) or not value.strip():
        raise DataError('Health JSON does not contain a valid deploy timestamp')

    text = value.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise DataError(
            f"Could not parse value of latest_deploy_time as a date: "
            f"{value!r}") from None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def fetch_deploy_time(url: str, session: Optional[requests.Session] = None,
                      timeout: float = 30) -> datetime:
    """Return the time of the latest production deploy."""
    health = get_json(url, session=session, timeout=timeout)
    if not isinstance(health, dict):
        raise DataError(f"Health JSON from {url} is not an object")
    return parse_deploy_time(health.get('latest_deploy_time'))


def is_recent_deploy(deploy_time: datetime,
                     now: Optional[datetime] = None) -> bool:
    """True if *deploy_time* is no more than 24 hours before *now*."""
    now = now or datetime.now(timezone.utc)
    return now - deploy_time <= RECENT_DEPLOY_WINDOW
