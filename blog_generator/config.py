"""Central configuration for the blog generation pipeline."""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Paths ──────────────────────────────────────────────────────────────────
ROOT_DIR = Path(__file__).resolve().parent.parent
BLOG_OUTPUT_DIR = ROOT_DIR / "blogs" / "popular"
BLOG_FILE_PREFIX = "blog-"

# ── API Keys ───────────────────────────────────────────────────────────────
OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY", "")
# PIXELS_API is the name older .env files use
PEXELS_API_KEY = os.getenv("PIXELS_API", "") or os.getenv("PEXELS_API_KEY", "")

# ── Completion settings ────────────────────────────────────────────────────
BASE_URL = os.getenv("BASE_URL", "https://openrouter.ai/api/v1")
COMPLETION_MODEL = os.getenv("COMPLETION_MODEL", "deepseek/deepseek-r1-distill-qwen-32b:free")
COMPLETION_TEMPERATURE = 0.7
COMPLETION_MAX_TOKENS = 3000
APP_TITLE = "Blog Content Generator"  # sent as X-Title for OpenRouter attribution

# ── Pexels settings ────────────────────────────────────────────────────────
PEXELS_SEARCH_URL = "https://api.pexels.com/v1/search"
PEXELS_PER_PAGE = 10
PEXELS_TIMEOUT = 30  # seconds
PEXELS_DEFAULT_ALT = "Pexels image"

# ── Site / rendering ───────────────────────────────────────────────────────
SITE_URL = os.getenv("SITE_URL", "http://127.0.0.1:3000")
SITE_NAME = "My Website"
ESCAPE_HTML = os.getenv("ESCAPE_HTML", "").strip().lower() in ("1", "true", "yes")
PREVIEW_CHARS = 300

# ── Page report targets ────────────────────────────────────────────────────
META_DESCRIPTION_MIN = 150
META_DESCRIPTION_MAX = 160
SIDEBAR_TAG_LIMIT = 5
