#!/usr/bin/env python3
"""
Taskie Command Line Client

Talk to the Taskie backend from a terminal.

Usage:
    taskie status                                   # Network check
    taskie register NAME EMAIL PASSWORD             # Create account
    taskie login NAME EMAIL PASSWORD                # Prints a token
    export TASKIE_TOKEN=<token>                     # Or pass --token
    taskie tasks                                    # List open tasks
    taskie add "Buy milk" --content "2%" --priority 2
    taskie complete TASK_ID
    taskie delete TASK_ID
    taskie profile

    --mock uses an in-memory backend that lives for one command. It comes
    with a demo account (demo@taskie.test / demo, token "demo-token") and
    one open task, "demo-1":
    taskie --mock --token demo-token tasks

Exit codes:
    0 = success, 1 = API failure, 2 = no usable network
"""

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from config.settings import LOG_DIR, TASKIE_TOKEN
from core.logging_setup import setup_logging
from core.network import create_network_status_checker, get_network_status
from networking import RemoteApi, Result, Session, create_remote_api
from networking.implementations import MockRemoteApiService
from networking.models import AddTaskRequest, Task, UserDataRequest

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_OFFLINE = 2


# =============================================================================
# COMMANDS
# =============================================================================


def cmd_register(api: RemoteApi, args: argparse.Namespace) -> Result:
    result = api.register_user(_credentials(args))
    if result.is_success:
        print(f"✅ {result.value}")
    return result


def cmd_login(api: RemoteApi, args: argparse.Namespace) -> Result:
    result = api.login_user(_credentials(args))
    if result.is_success:
        print(f"✅ Logged in. Token: {result.value}")
        print(f"   export TASKIE_TOKEN={result.value}")
    return result


def cmd_tasks(api: RemoteApi, args: argparse.Namespace) -> Result:
    result = api.get_tasks()
    if result.is_success:
        _print_tasks(result.value)
    return result


def cmd_add(api: RemoteApi, args: argparse.Namespace) -> Result:
    request = AddTaskRequest(
        title=args.title,
        content=args.content,
        task_priority=args.priority,
    )
    result = api.add_task(request)
    if result.is_success:
        print(f"✅ Added task {result.value.id}")
    return result


def cmd_complete(api: RemoteApi, args: argparse.Namespace) -> Result:
    result = api.complete_task(args.task_id)
    if result.is_success:
        print(f"✅ Completed task {args.task_id}")
    return result


def cmd_delete(api: RemoteApi, args: argparse.Namespace) -> Result:
    result = api.delete_task(args.task_id)
    if result.is_success:
        print(f"⚠️  Task {args.task_id} not deleted: no delete endpoint (the server keeps it)")
    return result


def cmd_profile(api: RemoteApi, args: argparse.Namespace) -> Result:
    result = api.get_user_profile()
    if result.is_success:
        profile = result.value
        print(f"👤 {profile.name} <{profile.email}>")
        print(f"   Open tasks: {profile.task_count}")
    return result


COMMANDS: Dict[str, Callable[[RemoteApi, argparse.Namespace], Result]] = {
    "register": cmd_register,
    "login": cmd_login,
    "tasks": cmd_tasks,
    "add": cmd_add,
    "complete": cmd_complete,
    "delete": cmd_delete,
    "profile": cmd_profile,
}


# =============================================================================
# HELPERS
# =============================================================================


def _credentials(args: argparse.Namespace) -> UserDataRequest:
    return UserDataRequest(name=args.name, email=args.email, password=args.password)


def _print_tasks(tasks: List[Task]) -> None:
    if not tasks:
        print("Nothing left to do 🎉")
        return

    for task in tasks:
        print(f"[{task.priority}] {task.id}  {task.title}")
        if task.content:
            print(f"      {task.content}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskie",
        description="Taskie task list client",
    )
    parser.add_argument("--token", default=TASKIE_TOKEN, help="Session token (default: $TASKIE_TOKEN)")
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Use a one-command in-memory backend with a demo account (token: demo-token)",
    )
    parser.add_argument(
        "--skip-network-check",
        action="store_true",
        help="Call the backend even if no usable transport is detected",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--log-dir", default=LOG_DIR, help="Log file directory")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("status", help="Show network status")

    for name in ("register", "login"):
        sub = subparsers.add_parser(name, help=f"{name.capitalize()} a user")
        sub.add_argument("name")
        sub.add_argument("email")
        sub.add_argument("password")

    subparsers.add_parser("tasks", help="List incomplete tasks")

    add = subparsers.add_parser("add", help="Create a task")
    add.add_argument("title")
    add.add_argument("--content", default="")
    add.add_argument("--priority", type=int, default=1)

    for name in ("complete", "delete"):
        sub = subparsers.add_parser(name, help=f"{name.capitalize()} a task")
        sub.add_argument("task_id")

    subparsers.add_parser("profile", help="Show user profile")

    return parser


# =============================================================================
# ENTRY POINT
# =============================================================================


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments, run one command, return the exit code.
    """
    args = build_parser().parse_args(argv)

    setup_logging(level="DEBUG" if args.verbose else "WARNING", log_dir=args.log_dir)
    logger = logging.getLogger(__name__)

    checker = create_network_status_checker(force_mock=args.mock)

    if args.command == "status":
        is_connected, status = get_network_status(checker)
        print(f"{'✓' if is_connected else '✗'} {status}")
        return EXIT_OK if is_connected else EXIT_OFFLINE

    api = create_remote_api(Session(args.token), force_mock=args.mock)
    if args.mock and isinstance(api.service, MockRemoteApiService):
        api.service.seed_demo_account()
    handler = COMMANDS[args.command]

    try:
        if args.skip_network_check:
            result = handler(api, args)
        else:
            result = checker.perform_if_connected_to_internet(lambda: handler(api, args))
    finally:
        api.service.close()

    if result is None:
        print("✗ No internet connection")
        return EXIT_OFFLINE

    if not result.is_success:
        logger.debug(f"{args.command} failed: {result.error!r}")
        print(f"❌ {args.command} failed: {result.message} ({result.error.kind.value})")
        return EXIT_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
