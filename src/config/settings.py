"""
Configuration settings for the Person Records service
"""

import os
import logging

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Store configuration
DATABASE_URL = os.getenv("DATABASE_URL", "postgresql://localhost:5432/persondb")
DB_CONNECT_TIMEOUT = float(os.getenv("DB_CONNECT_TIMEOUT", 5))  # Fail fast at startup
DB_PING_TIMEOUT = float(os.getenv("DB_PING_TIMEOUT", 1))  # Per-request availability check
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 1))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))

# HTTP configuration
PORT = int(os.getenv("PORT", 3000))

if not os.getenv("DATABASE_URL"):
    logger.warning(f"DATABASE_URL not set - using default {DATABASE_URL}")
