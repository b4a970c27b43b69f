# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "DAILY_SCHEDULE_APP_NAME": "Menu title and log name (default: daily-schedule).",
    "DAILY_SCHEDULE_LOG_LEVEL": "Console logging level (default: INFO).",
    "DAILY_SCHEDULE_LOG_TO_FILE": "Write <data_dir>/schedule.log (true/false, default: true).",
    # Console
    "DAILY_SCHEDULE_NOTIFY_CONSOLE": "Print conflict/update alerts (true/false, default: true).",
    # Paths (gitignored)
    "DAILY_SCHEDULE_DATA_DIR": "Local data directory for logs (default: .local/daily_schedule).",
}
