"""The handlers behind each command."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from gator.commands import Command
from gator.config import Config
from gator.database import Feed, Queries, User
from gator.rss import RSSFeed, fetch_feed

AGG_FEED_URL = "https://example.com/index.xml"
SEPARATOR = "====================================="


@dataclass
class State:
    """What every handler works with: the database and the configuration."""

    db: Queries
    cfg: Config
    fetch: Callable[[str], RSSFeed] = fetch_feed
    agg_url: str = AGG_FEED_URL


class UsageError(ValueError):
    """A command was given the wrong number of arguments."""


def _now() -> datetime:
    return datetime.now(timezone.utc)


def handler_agg(state: State, cmd: Command) -> None:
    """Fetch the aggregation feed and print it."""
    try:
        feed = state.fetch(state.agg_url)
    except Exception as err:
        raise RuntimeError(f"couldn't fetch feed: {err}") from err
    print(f"Feed: {feed}")


def handler_add_feed(state: State, cmd: Command) -> None:
    """Add a feed owned by the current user."""
    user = state.db.get_user(state.cfg.current_user_name)

    if len(cmd.args) != 2:
        raise UsageError(f"usage: {cmd.name} <name> <url>")
    name, url = cmd.args

    now = _now()
    try:
        feed = state.db.create_feed(
            id=uuid.uuid4(),
            created_at=now,
            updated_at=now,
            name=name,
            url=url,
            user_id=user.id,
        )
    except Exception as err:
        raise RuntimeError(f"couldn't create feed: {err}") from err

    print("Feed created successfully:")
    print(format_feed(feed, user))
    print()
    print(SEPARATOR)


def handler_list_feeds(state: State, cmd: Command) -> None:
    """Print every feed with the name of the user who added it."""
    try:
        feeds = state.db.get_feeds()
    except Exception as err:
        raise RuntimeError(f"couldn't get feeds: {err}") from err

    if not feeds:
        print("No feeds found.")
        return

    print(f"Found {len(feeds)} feeds:")
    for feed in feeds:
        try:
            user = state.db.get_user_by_id(feed.user_id)
        except Exception as err:
            raise RuntimeError(f"couldn't get user: {err}") from err
        print(format_feed(feed, user))
        print(SEPARATOR)


def handler_reset(state: State, cmd: Command) -> None:
    """Delete every user."""
    try:
        state.db.delete_users()
    except Exception as err:
        raise RuntimeError(f"couldn't delete users: {err}") from err
    print("Database reset successfully!")


def handler_register(state: State, cmd: Command) -> None:
    """Create a user and make it the current one."""
    if len(cmd.args) != 1:
        raise UsageError(f"usage: {cmd.name} <name>")
    name = cmd.args[0]

    now = _now()
    try:
        user = state.db.create_user(
            id=uuid.uuid4(), created_at=now, updated_at=now, name=name
        )
    except Exception as err:
        raise RuntimeError(f"couldn't create user: {err}") from err

    try:
        state.cfg.set_user(user.name)
    except Exception as err:
        raise RuntimeError(f"couldn't set current user: {err}") from err

    print("User created successfully:")
    print(format_user(user))


def handler_login(state: State, cmd: Command) -> None:
    """Switch the current user to an existing one."""
    if len(cmd.args) != 1:
        raise UsageError(f"usage: {cmd.name} <name>")
    name = cmd.args[0]

    try:
        state.db.get_user(name)
    except Exception as err:
        raise RuntimeError(f"couldn't find user: {err}") from err

    try:
        state.cfg.set_user(name)
    except Exception as err:
        raise RuntimeError(f"couldn't set current user: {err}") from err

    print("User switched successfully!")


def handler_list_users(state: State, cmd: Command) -> None:
    """Print every user, marking the current one."""
    try:
        users = state.db.get_users()
    except Exception as err:
        raise RuntimeError(f"couldn't find users: {err}") from err
    for user in users:
        if user.name == state.cfg.current_user_name:
            print(f"* {user.name} (current)")
        else:
            print(f"* {user.name}")


def format_feed(feed: Feed, user: User) -> str:
    """Describe a feed and its owner, one field per line."""
    return "\n".join(
        [
            f"* ID:            {feed.id}",
            f"* Created:       {feed.created_at}",
            f"* Updated:       {feed.updated_at}",
            f"* Name:          {feed.name}",
            f"* URL:           {feed.url}",
            f"* User:          {user.name}",
        ]
    )


def format_user(user: User) -> str:
    """Describe a user, one field per line."""
    return f" * ID:      {user.id}\n * Name:    {user.name}"