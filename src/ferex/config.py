"""
Application configuration and constants.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# API configuration
API_VERSION = "1.0.0"
API_TITLE = "FEREX API"
API_DESCRIPTION = "Local scenario storage and FERS retirement calculations"

# Server (the desktop shell connects to this address)
API_HOST = os.getenv("FEREX_HOST", "127.0.0.1")
API_PORT = int(os.getenv("FEREX_PORT", "8020"))

# CORS configuration
CORS_ORIGINS = ["*"]  # The desktop shell talks to us from its own origin
CORS_CREDENTIALS = True
CORS_METHODS = ["*"]
CORS_HEADERS = ["*"]

# Storage
DATA_DIR = Path(os.getenv("FEREX_DATA_DIR", Path(__file__).parent.parent.parent / "data"))
DB_FILENAME = "ferex.db"
RECENT_SCENARIOS_LIMIT = 5

# FERS pension rules
PENSION_MULTIPLIER = 0.01
ENHANCED_PENSION_MULTIPLIER = 0.011  # age 62+ with 20+ years of service
ENHANCED_MIN_AGE = 62
ENHANCED_MIN_SERVICE_YEARS = 20.0
COLA_MIN_AGE = 62

# Logging configuration
LOG_LEVEL = os.getenv("FEREX_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
