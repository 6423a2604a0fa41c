"""Command-line entry point."""

from __future__ import annotations

import sys
from contextlib import closing

from gator.commands import Command, Commands
from gator.config import read_config
from gator.database import Queries, connect
from gator.handlers import (
    State,
    handler_add_feed,
    handler_agg,
    handler_list_feeds,
    handler_list_users,
    handler_login,
    handler_register,
    handler_reset,
)

USAGE = "Usage: cli <command> [args...]"


def build_commands() -> Commands:
    """Return the registry holding every command the program knows."""
    cmds = Commands()
    cmds.register("login", handler_login)
    cmds.register("register", handler_register)
    cmds.register("reset", handler_reset)
    cmds.register("users", handler_list_users)
    cmds.register("agg", handler_agg)
    cmds.register("addfeed", handler_add_feed)
    cmds.register("feeds", handler_list_feeds)
    return cmds


def _fail(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the command named in ``argv``; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        cfg = read_config()
    except (OSError, ValueError) as err:
        return _fail(f"error reading config: {err}")

    try:
        conn = connect(cfg.db_url)
    except Exception as err:
        return _fail(f"error connecting to db: {err}")

    with closing(conn):
        state = State(db=Queries(conn), cfg=cfg)
        cmds = build_commands()

        if not args:
            return _fail(USAGE)

        try:
            cmds.run(state, Command(name=args[0], args=args[1:]))
        except Exception as err:
            return _fail(str(err))
    return 0


if __name__ == "__main__":
    sys.exit(main())