from pathlib import Path

from mealboard.utilities.config import DATA_DIR as _CONFIG_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIG_DATA_DIR).resolve()
RECIPES_FILE = DATA_DIR / 'recipes.json'
STATE_FILE = DATA_DIR / 'planner_state.json'
USERS_FILE = DATA_DIR / 'users.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'STATE_FILE', 'USERS_FILE']
