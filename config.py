"""
Configuration: value-bet defaults, pool accounting, logging.
Defaults can be overridden from the environment or a .env file.
"""
import os
from decimal import Decimal

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

SERVICE_VERSION = "1.0.0"

# Value bet defaults (user-adjustable per request)
VALUE_THRESHOLD_PERCENT = Decimal(os.getenv("VALUE_THRESHOLD_PERCENT", "10"))   # Min value % to qualify
MINIMUM_POOL_SIZE = Decimal(os.getenv("MINIMUM_POOL_SIZE", "5000"))             # Skip thin pools
MAX_DILUTION_PERCENT = Decimal(os.getenv("MAX_DILUTION_PERCENT", "5"))          # Max impact of our stake on the dividend
DEFAULT_STAKE_FOR_DILUTION = Decimal(os.getenv("DEFAULT_STAKE_FOR_DILUTION", "100"))
TOP_BET_COUNT = int(os.getenv("TOP_BET_COUNT", "5"))

# Odds type requested from the tote feed. The engine never reads it.
ODDS_TYPE = os.getenv("ODDS_TYPE", "Base")
ODDS_TYPES = ('Base', 'Enhanced')

# Combination keys: "1-2" (exacta), "1-2-3" (trifecta)
COMBINATION_SEPARATOR = '-'
EXACTA_LEGS = 2
TRIFECTA_LEGS = 3

# Placeholder WIN odds when the feed has no WIN market: 2 + 1.5 * runner number
SYNTHETIC_ODDS_BASE = Decimal("2")
SYNTHETIC_ODDS_STEP = Decimal("1.5")

# Pool display
CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "£")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")
