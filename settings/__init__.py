"""Application settings."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent

# Database
DB_PATH = os.getenv("VOTEMATCH_DB_PATH", "votematch.duckdb")

# Logging
LOG_DIR = Path("logs")

# Static tables (party profiles, coalition tables, questions)
DATA_DIR = Path(os.getenv("VOTEMATCH_DATA_DIR", str(ROOT_DIR / "data")))

# Scoring
COMPAT_A = float(os.getenv("VOTEMATCH_A", "0.30"))
COMPAT_B = float(os.getenv("VOTEMATCH_B", "0.60"))
COVERAGE_LAMBDA = float(os.getenv("VOTEMATCH_LAMBDA", "0.12"))
SOFT_CONFLICT = os.getenv("VOTEMATCH_SOFT_CONFLICT", "false").lower() in ("1", "true", "yes")
SOFT_CONFLICT_FLOOR = float(os.getenv("VOTEMATCH_SOFT_CONFLICT_FLOOR", "0.12"))
AI_FUSE = os.getenv("VOTEMATCH_AI_FUSE", "false").lower() in ("1", "true", "yes")
AI_MIN_CONFIDENCE = float(os.getenv("VOTEMATCH_AI_MIN_CONF", "0.85"))
TOPIC_WEIGHT_STRATEGY = os.getenv("VOTEMATCH_WEIGHTS", "linear")
MIN_RELIABLE_ANSWERS = 12

# Coalitions
COALITION_ESTIMATOR = os.getenv("VOTEMATCH_COALITIONS", "exact")
MAX_EXACT_PARTIES = 20

# Collaborators (vector search + answer generation)
RAG_BASE_URL = os.getenv("RAG_BASE_URL", "http://localhost:54321")
RAG_API_KEY = os.getenv("RAG_API_KEY", "")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
EMBEDDING_MODEL = "text-embedding-3-small"
CHAT_MODEL = os.getenv("VOTEMATCH_CHAT_MODEL", "gpt-4o-mini")
API_TIMEOUT = 60
RAG_TOP_K = 8
MAX_CONCURRENT = 5
