#!/usr/bin/env python3
"""Command-line entry point for read-only showcase queries.

Environment variables:

- SHOWCASE_ENV: 'development' or 'production' (default: development)
- LOG_LEVEL: Logging level (default: 'INFO')

Usage:
    showcase-api projects                          # First page, unfiltered
    showcase-api projects --category Design --cursor abc
    showcase-api project <id>
    showcase-api user someone@example.com
    showcase-api user-projects <user-id> --last 8
    showcase-api token
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, List, Optional

from dotenv import load_dotenv

from showcase_api.config import ShowcaseConfig
from showcase_api.services import ProjectService, UserService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="showcase-api",
        description="Query the project showcase data service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    projects = subparsers.add_parser("projects", help="List one page of projects")
    projects.add_argument("--category", help="Filter by category (enables cursor pagination)")
    projects.add_argument("--cursor", dest="end_cursor", help="endCursor from a previous page")

    project = subparsers.add_parser("project", help="Show a single project")
    project.add_argument("project_id")

    user = subparsers.add_parser("user", help="Look up a user by email")
    user.add_argument("email")

    user_projects = subparsers.add_parser("user-projects", help="List a user's projects")
    user_projects.add_argument("user_id")
    user_projects.add_argument("--last", type=int, help="Number of most recent projects")

    subparsers.add_parser("token", help="Fetch the current session token payload")
    return parser


def run_command(args: argparse.Namespace, config: ShowcaseConfig) -> Any:
    projects = ProjectService(config)
    users = UserService(config)

    if args.command == "projects":
        return projects.fetch_all_projects(args.category, args.end_cursor)
    if args.command == "project":
        return projects.get_project_details(args.project_id)
    if args.command == "user":
        return users.get_user(args.email)
    if args.command == "user-projects":
        return projects.get_user_projects(args.user_id, last=args.last)
    if args.command == "token":
        return users.fetch_token()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the showcase-api CLI."""
    args = build_parser().parse_args(argv)

    # Loads from .env in current working directory
    load_dotenv()

    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = ShowcaseConfig.from_environment()
    logger.debug("Using configuration: %s", config.to_dict())
    config.validate_or_raise()

    result = run_command(args, config)
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
