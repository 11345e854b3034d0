import os
from dotenv import load_dotenv

load_dotenv()

# Basic settings
DATA_DIR = os.path.abspath(os.getenv("DATA_DIR", "data"))
LOG_DIR = os.path.join(DATA_DIR, "logs")
DB_PATH = os.getenv("DB_PATH", os.path.join(DATA_DIR, "posts.db"))

# Permalinks are built from the site URL; {site_url} and {id} are substituted
SITE_URL = os.getenv("SITE_URL", "http://localhost:8000").rstrip("/")
PERMALINK_TEMPLATE = os.getenv("PERMALINK_TEMPLATE", "{site_url}/?p={id}")

# Block whose delimiter marks an attached "Read More" reference
MARKER_BLOCK_NAME = os.getenv("MARKER_BLOCK_NAME", "dmg/post-finder")

# Marker scan configuration ("pushdown" or "verification")
SCAN_STRATEGY = os.getenv("SCAN_STRATEGY", "pushdown").lower()
SCAN_BATCH_SIZE = int(os.getenv("SCAN_BATCH_SIZE", "100"))
SCAN_DEFAULT_DAYS = int(os.getenv("SCAN_DEFAULT_DAYS", "30"))

# Search defaults
DEFAULT_PER_PAGE = int(os.getenv("DEFAULT_PER_PAGE", "10"))

# API Configuration
API_HOST = os.getenv("API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("API_PORT", "8000"))
API_PREFIX = os.getenv("API_PREFIX", "/post-finder/v1")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

# HTTP client used by the editor search session
API_BASE_URL = os.getenv("API_BASE_URL", f"http://{API_HOST}:{API_PORT}")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

os.makedirs(DATA_DIR, exist_ok=True)
os.makedirs(LOG_DIR, exist_ok=True)
