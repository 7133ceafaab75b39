# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use .env (local, gitignored) for machine-specific values.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Server
    "TASKLIST_HOST": "Bind address for the HTTP/GraphQL server (default: 127.0.0.1).",
    "TASKLIST_PORT": "Port for the HTTP/GraphQL server (default: 4000).",
    "TASKLIST_GRAPHQL_PATH": "GraphQL endpoint path (default: /graphql).",
    # Front doors
    "TASKLIST_HTTP_ENABLED": "Run the HTTP/GraphQL server on `tasklist serve` (true/false).",
    "TASKLIST_CONSOLE_ENABLED": "Also run the console REPL on `tasklist serve` (true/false).",
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory (default: .local/tasklist).",
    "TASKLIST_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    # Dev helpers
    "TASKLIST_SEED_ON_START": "Reset the table with sample tasks at startup (true/false).",
}
