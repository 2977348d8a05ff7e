# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "LUMINA_APP_NAME": "Name used in the greeting (default: Lumina).",
    "LUMINA_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Paths
    "LUMINA_DATA_DIR": "Local data directory (default: data).",
    "LUMINA_TASKS_PATH": "Task file path (default: <data_dir>/data.txt).",
    "LUMINA_LOG_DIR": "Directory for lumina.log (default: <data_dir>).",
    # Console
    "LUMINA_INDENT_WIDTH": "Spaces before each reply line (default: 2).",
}
