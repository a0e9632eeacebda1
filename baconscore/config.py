"""
Application configuration and environment variables
"""
import os
from pathlib import Path

# Dataset configuration
DATA_PATH = Path(os.environ.get('BACON_DATA_PATH', 'data/movies.txt'))

# Reference actor every score is measured from
ANCHOR_NAME = os.environ.get('BACON_ANCHOR', 'Kevin Bacon')

# Console log level for the CLI (loguru level names)
LOG_LEVEL = os.environ.get('BACON_LOG_LEVEL', 'WARNING').upper()

# Close-name suggestions for unknown actors
SUGGESTION_LIMIT = int(os.environ.get('BACON_SUGGESTIONS', '3'))
SUGGESTION_CUTOFF = float(os.environ.get('BACON_MATCH_CUTOFF', '80'))

# API configuration
API_TITLE = "Bacon Score API"
API_VERSION = "1.0.0"
DEFAULT_API_URL = os.environ.get('BACON_API_URL', 'http://localhost:8000')
