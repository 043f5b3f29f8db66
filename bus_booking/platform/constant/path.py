from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[3]

# Hourly debug log files (DEBUG mode only)
LOG_DIR = PROJECT_ROOT / 'logs'
