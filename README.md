# gator

`gator` is a small command-line RSS aggregator. It keeps a list of users
and the feeds they have added in a local SQLite database, remembers who
is logged in, and can fetch and print an RSS feed. It needs nothing
beyond the Python standard library.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

`gator` reads its settings from `.gatorconfig.json` in your home
directory. The file must exist before the first command is run. It holds
the database location and the name of the user who is currently logged
in:

```json
{"db_url": "/path/to/gator.db", "current_user_name": ""}
```

`db_url` names the SQLite database to use: a file path, `:memory:`, or a
`sqlite:///path` URL. The tables are created on first use.
`current_user_name` is updated by `gator` itself whenever you register
or log in; the file is then rewritten as one line of compact JSON.

## Usage

```
gator <command> [args...]
```

| Command                  | What it does                                              |
|--------------------------|-----------------------------------------------------------|
| `register <name>`        | Create a user and log in as that user                     |
| `login <name>`           | Switch to an existing user                                |
| `users`                  | List all users, marking the current one                   |
| `reset`                  | Delete all users, and with them their feeds               |
| `addfeed <name> <url>`   | Add a feed owned by the current user                      |
| `feeds`                  | List every feed together with the user who added it       |
| `agg`                    | Fetch the built-in RSS feed and print its contents        |

User names and feed URLs must be unique. An example session:

```
gator register alice
gator addfeed "Example Blog" https://example.com/index.xml
gator feeds
gator users
```

A missing or unreadable configuration file, an unknown command, a wrong
number of arguments, or a failing database or network operation prints
the error to standard error and exits with status 1.

## Using it as a library

The pieces behind the command line can be used on their own:

- `gator.rss.parse_feed(data)` turns RSS XML into an `RSSFeed` with its
  `RSSItem`s, unescaping HTML entities in titles and descriptions;
  `gator.rss.fetch_feed(feed_url, timeout)` downloads a feed (timeout
  10 seconds by default, `User-Agent: gator`) and parses the body.
- `gator.database.connect(db_url)` opens the database and creates the
  tables; `gator.database.Queries` wraps the connection and offers
  `create_user`, `get_user`, `get_user_by_id`, `get_users`,
  `delete_users`, `create_feed` and `get_feeds`, returning `User` and
  `Feed` records. A missing user raises `gator.database.NotFoundError`.
- `gator.config.read_config(path)` and `gator.config.write_config(cfg, path)`
  load and save a `Config`; `Config.set_user(name)` changes the current
  user and saves the file it was read from.
- `gator.commands.Commands` maps command names to handlers and runs a
  `Command`; running an unregistered name raises
  `gator.commands.CommandNotFoundError`.
- `gator.handlers` holds the handler for each command and the `State`
  they work on; `gator.cli.build_commands()` returns the full registry.

## Limitations

`gator` does not follow feeds over time or store their posts: `agg`
fetches one fixed feed once and prints it, and the feeds added with
`addfeed` are only recorded, not fetched.