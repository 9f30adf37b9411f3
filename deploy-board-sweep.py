#!/usr/bin/env python3
"""
Post-deploy project board sweep.

When production was deployed within the last 24 hours, moves every card in
the QA column of a repository project board to the top of the Done column,
then archives the oldest Done cards beyond the configured limit.

Environment Variables Required:
- INPUT_PROJECT_NAME: Name of the repository project board
- INPUT_DONE_COLUMN_NAME: Name of the Done column
- INPUT_QA_COLUMN_NAME: Name of the QA column
- INPUT_DONE_COLUMN_CARD_LIMIT: Cards to keep in the Done column
- INPUT_TOKEN: GitHub token with access to the project board
- GITHUB_REPOSITORY: owner/repo holding the project

Optional:
- DEPLOY_HEALTH_URL: JSON endpoint exposing latest_deploy_time
- GITHUB_API_URL: API base URL (GitHub Enterprise)
- SWEEP_REQUEST_TIMEOUT, SWEEP_MAX_WORKERS
"""

from deploy_board_sweep.cli import run

if __name__ == '__main__':
    run()
