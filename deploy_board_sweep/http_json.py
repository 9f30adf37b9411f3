"""Plain HTTPS GET returning parsed JSON."""

from typing import Any, Optional

import requests

from deploy_board_sweep.errors import DataError, NetworkError
from deploy_board_sweep.utils import is_success_status


def get_json(url: str, session: Optional[requests.Session] = None,
             timeout: float = 30) -> Any:
    """Fetch *url* and return the decoded JSON body.

    Raises NetworkError on a connection failure or a status outside
    200-399, and DataError when the body is not valid JSON.
    """
    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, timeout=timeout)
    except requests.RequestException as exc:
        raise NetworkError(f"Request to {url} failed: {exc}") from exc

    if not is_success_status(resp.status_code):
        raise NetworkError(
            f"Request to {url} was not successful\n"
            f"  request returned with status:{resp.status_code}",
            status_code=resp.status_code)

    try:
        return resp.json()
    except ValueError as exc:
        raise DataError(f"Response from {url} is not valid JSON: {exc}") \
            from exc
