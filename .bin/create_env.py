#!/usr/bin/env python
"""
Script to create a .env file with the default validation settings.
Pass --force to overwrite an existing file without asking.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent.absolute()

env_content = """# App Settings
DEBUG=false
VERSION=0.1.0
LOG_LEVEL=INFO
CORS_ORIGINS=["*"]

# Upstream limits
FILE_SEARCH_MAX_NUM_RESULTS=50
FILE_ID_MIN_SUFFIX=1
PROMPT_ID_MIN_SUFFIX=1
EXPIRES_AFTER_MIN_SECONDS=3600
EXPIRES_AFTER_MAX_SECONDS=2592000
METADATA_MAX_KEYS=16
METADATA_MAX_KEY_LENGTH=64
METADATA_MAX_VALUE_LENGTH=512
LIST_FILES_MAX_LIMIT=10000
"""


def create_env_file():
    """Create a .env file with default values."""
    env_path = project_root / ".env"

    if env_path.exists() and "--force" not in sys.argv[1:]:
        overwrite = input(f".env file already exists at {env_path}. Overwrite? (y/n): ")
        if overwrite.lower() != "y":
            print("Operation cancelled.")
            return

    with open(env_path, "w") as f:
        f.write(env_content)

    print(f".env file created successfully at {env_path}.")


if __name__ == "__main__":
    create_env_file()
