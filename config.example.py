# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "MYTODO_APP_NAME": "App display name (default: mytodo).",
    "MYTODO_LOG_LEVEL": "Console logging level (default: INFO; WARNING keeps the REPL quiet).",
    # Paths (gitignored)
    "MYTODO_DATA_DIR": "Local data directory (default: .local/mytodo).",
    "MYTODO_LOG_FILE": "Log file path (default: <data_dir>/mytodo.log).",
    # Task store
    "MYTODO_FIRST_ID": "First task id handed out (default: 1; values below 1 are ignored).",
    "MYTODO_SEED_ON_START": "Add the sample tasks at startup (true/false, default: false).",
    "MYTODO_CONFIRM_DELETE": "Ask y/N before /delete (true/false, default: true).",
}
