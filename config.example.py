# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "Name shown in the welcome line (default: Terminal TODO).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Storage
    "TODO_STORAGE_BACKEND": "sqlite | json | memory (default: sqlite).",
    "TODO_STORAGE_KEY": "Namespace key of the saved state (default: terminal_todo_items_v1).",
    # Local paths (gitignored)
    "TODO_DATA_DIR": "Root for local data and todo.log (default: .local/todo).",
    "TODO_STATE_DB_PATH": "SQLite file for the sqlite backend (default: <data_dir>/todo.sqlite3).",
    "TODO_STATE_DIR": "Directory for the json backend (default: <data_dir>/state).",
    # Console
    "TODO_COLOR": "ANSI colors on/off (default: on for a TTY unless NO_COLOR is set).",
    "TODO_HISTORY_SIZE": "Input history length, 0 = unbounded (default: 500).",
}
