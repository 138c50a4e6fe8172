# supplier_matching/config.py
from dotenv import load_dotenv
import os

load_dotenv()

# Scoring weights (maximum credit per criterion)
BUSINESS_TYPE_WEIGHT = 25
CATEGORY_WEIGHT = 20
TAG_WEIGHT = 40
INDUSTRY_WEIGHT = 10
REPUTATION_BONUS = 5

# Credit awarded when the request leaves a criterion unset
BUSINESS_TYPE_NEUTRAL = 15
CATEGORY_NEUTRAL = 10
TAG_NEUTRAL = 20
INDUSTRY_NEUTRAL = 5

REPUTATION_BONUS_THRESHOLD = 80
MAX_RAW_SCORE = BUSINESS_TYPE_WEIGHT + CATEGORY_WEIGHT + TAG_WEIGHT + INDUSTRY_WEIGHT + REPUTATION_BONUS

# Library default threshold for match_suppliers
DEFAULT_MINIMUM_SCORE = 20

# Runtime parameters (batch runner)
MIN_MATCH_SCORE = float(os.getenv("MIN_MATCH_SCORE", str(DEFAULT_MINIMUM_SCORE)))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# File names
SUPPLIERS_CSV = os.getenv("SUPPLIERS_CSV", "suppliers.csv")
REQUESTS_CSV = os.getenv("REQUESTS_CSV", "requests.csv")
OUTPUT_CSV = os.getenv("OUTPUT_CSV", "supplier_matches.csv")

# Separator for multi-valued CSV cells ("acero;aluminio")
LIST_SEPARATOR = ";"
