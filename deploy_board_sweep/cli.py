"""CLI entry point for the post-deploy board sweep."""

import argparse
import sys
import traceback
from dataclasses import replace

from deploy_board_sweep.board_api import ProjectBoardAPI
from deploy_board_sweep.config import Config, split_repository
from deploy_board_sweep.errors import BoardSweepError
from deploy_board_sweep.sweeper import Sweeper


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Move QA cards to Done after a recent production deploy '
                    'and archive the oldest Done cards over the limit')
    parser.add_argument('--project-name',
                        help='Project board name (INPUT_PROJECT_NAME)')
    parser.add_argument('--done-column',
                        help='Done column name (INPUT_DONE_COLUMN_NAME)')
    parser.add_argument('--qa-column',
                        help='QA column name (INPUT_QA_COLUMN_NAME)')
    parser.add_argument('--card-limit',
                        help='Cards kept in the Done column '
                             '(INPUT_DONE_COLUMN_CARD_LIMIT)')
    parser.add_argument('--repository',
                        help='owner/repo (GITHUB_REPOSITORY)')
    parser.add_argument('--health-url',
                        help='Health JSON with latest_deploy_time '
                             '(DEPLOY_HEALTH_URL)')
    parser.add_argument('--max-workers', type=int,
                        help='Concurrent archive requests (default: 8)')
    parser.add_argument('--debug', action='store_true',
                        help='Verbose output')
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """Environment configuration with command line overrides applied."""
    config = Config.from_env()
    overrides = {
        'project_name': args.project_name,
        'done_column_name': args.done_column,
        'qa_column_name': args.qa_column,
        'done_column_card_limit': args.card_limit,
        'deploy_health_url': args.health_url,
        'max_workers': args.max_workers,
    }
    if args.repository:
        overrides['owner'], overrides['repo'] = split_repository(
            args.repository)
    config = replace(config, **{k: v for k, v in overrides.items()
                                if v is not None})
    if args.debug:
        config.debug = True
    return config


def main(argv=None) -> int:
    """Run one sweep; return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
        config.validate()
        api = ProjectBoardAPI(config.token, config.owner, config.repo,
                              base_url=config.api_url,
                              timeout=config.request_timeout,
                              debug=config.debug)
        Sweeper(config, api).run()
    except BoardSweepError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        if args.debug:
            traceback.print_exc()
        return 1
    except Exception as exc:
        print(f"ERROR: Unexpected failure: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 1
    return 0


def run():
    sys.exit(main())
