# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file,
read with python-dotenv; real environment variables win).

This file exists to make the repo self-documenting even without opening src/weekrunner/config.py.
"""

ENV_VARS = {
    # App / logging
    "WEEKRUNNER_APP_NAME": "App display name (default: weekrunner).",
    "WEEKRUNNER_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "WEEKRUNNER_DATA_DIR": "Local data directory (default: .local/weekrunner). Run output goes to <data_dir>/runs.",
    "WEEKRUNNER_LOG_DIR": "Directory for weekrunner.log (default: <data_dir>).",
    # Availability calendar
    "WEEKRUNNER_INTERVAL_MINUTES": "Minutes per calendar block, must divide 60 (default: 15).",
    "WEEKRUNNER_DEFAULT_STATUS": "Initial status of every block: free | busy (default: free).",
    # Script tasks
    "WEEKRUNNER_SHELL": "Shell used to run scripts (default: bash).",
    "WEEKRUNNER_POLL_INTERVAL": "Seconds between status polls while waiting (default: 0.1).",
}
