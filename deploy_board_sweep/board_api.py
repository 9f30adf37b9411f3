"""GitHub (classic) project board REST API helper used by the sweep."""

from typing import Any, Dict, List, Optional

import requests

from deploy_board_sweep.errors import DataError, NetworkError, RemoteError
from deploy_board_sweep.utils import is_success_status, require_int

# from https://docs.github.com/en/rest/reference/projects#list-project-cards
MAX_CARDS_PER_PAGE = 100


class ProjectBoardAPI:
    """Lightweight wrapper around the project board endpoints.

    List calls raise RemoteError on a non-success status. Mutations return
    the raw response so callers can tell 2xx, 304 and failures apart.
    """

    BASE = "https://api.github.com"

    def __init__(self, token: str, owner: str, repo: str,
                 base_url: Optional[str] = None, timeout: float = 30,
                 session: Optional[requests.Session] = None,
                 debug: bool = False):
        self.owner = owner
        self.repo = repo
        self.base = (base_url or self.BASE).rstrip('/')
        self.timeout = timeout
        self.debug = debug
        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f'token {token}',
            'Accept': 'application/vnd.github+json',
        })

    def _dbg(self, msg: str):
        if self.debug:
            print(f"[BOARD] {msg}")

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base}{path}"
        self._dbg(f"{method} {url} {kwargs.get('params') or ''}".rstrip())
        try:
            resp = self.session.request(method, url, timeout=self.timeout,
                                        **kwargs)
        except requests.RequestException as exc:
            raise NetworkError(f"{method} {path} failed: {exc}") from exc
        self._dbg(f"{method} {path} -> {resp.status_code}")
        return resp

    def _get_list(self, path: str, what: str,
                  params: Optional[Dict[str, Any]] = None) -> List[Dict]:
        resp = self._request('GET', path, params=params)
        if not is_success_status(resp.status_code):
            raise RemoteError(
                f"Request to fetch {what} was not successful\n"
                f"  request returned with status:{resp.status_code}",
                status_code=resp.status_code)
        try:
            data = resp.json()
        except ValueError as exc:
            raise DataError(f"Response for {what} is not valid JSON") from exc
        if not isinstance(data, list):
            raise DataError(f"Response for {what} is not a list")
        return data

    # -- projects / columns ---------------------------------------------------

    def list_projects(self) -> List[Dict]:
        # single page only; see locator
        return self._get_list(f"/repos/{self.owner}/{self.repo}/projects",
                              'project data')

    def list_columns(self, project_id: int) -> List[Dict]:
        return self._get_list(f"/projects/{project_id}/columns",
                              'project column list')

    # -- cards ----------------------------------------------------------------

    def get_card_page(self, column_id: int, page: int) -> List[Dict]:
        """Fetch one page of up to MAX_CARDS_PER_PAGE non-archived cards."""
        require_int(column_id, 'columnId')
        require_int(page, 'pageNumber')
        return self._get_list(
            f"/projects/columns/{column_id}/cards",
            f"card page #{page} from column id={column_id}",
            params={
                'archived_state': 'not_archived',
                'page': page,
                'per_page': MAX_CARDS_PER_PAGE,
            })

    def move_card(self, card_id: int, column_id: int) -> requests.Response:
        """Move a card to the top of *column_id*."""
        require_int(card_id, 'cardId')
        require_int(column_id, 'columnId')
        return self._request(
            'POST', f"/projects/columns/cards/{card_id}/moves",
            json={'column_id': column_id, 'position': 'top'})

    def archive_card(self, card_id: int) -> requests.Response:
        require_int(card_id, 'cardId')
        return self._request('PATCH', f"/projects/columns/cards/{card_id}",
                             json={'archived': True})
