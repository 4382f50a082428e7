# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_LOG_TO_FILE": "Also write <data_dir>/tasklist.log (true/false, default: true).",
    # Storage (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory (default: .local/tasklist).",
    "TASKLIST_STORE_PATH": "Key/value SQLite path (default: <data_dir>/defaults.sqlite3).",
    "TASKLIST_IN_MEMORY": "Keep tasks in memory only, nothing written to disk (true/false).",
}
