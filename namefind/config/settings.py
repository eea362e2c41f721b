"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Corpus ---
NAMEFIND_CORPUS_FILE: str = os.getenv("NAMEFIND_CORPUS_FILE", "corpus/train.txt")
NAMEFIND_OUTPUT_FILE: str = os.getenv("NAMEFIND_OUTPUT_FILE", "corpus/features.json")
CORPUS_ENCODING: str = os.getenv("CORPUS_ENCODING", "utf-8")
SKIP_MALFORMED_LINES: bool = os.getenv("SKIP_MALFORMED_LINES", "false").lower() == "true"

# --- Features ---
SHAPE_CACHE_SIZE: int = int(os.getenv("SHAPE_CACHE_SIZE", "4096"))

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
