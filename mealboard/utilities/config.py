"""Configuration management for the meal board application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Auto-save debounce (quiet interval before a scheduled save fires)
AUTOSAVE_DELAY_MS: Final[int] = int(os.getenv('AUTOSAVE_DELAY_MS', '800'))

# Web notices ring buffer
NOTICE_BUFFER_SIZE: Final[int] = int(os.getenv('NOTICE_BUFFER_SIZE', '300'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('MEALBOARD_DATA_DIR', str(BASE_DIR / 'data')))
