from pathlib import Path


# Repository root, alembic.ini and .env live here
BASE_DIR = Path(__file__).resolve().parents[3]

LOG_DIR = BASE_DIR / 'logs'
