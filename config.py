# config.py - docseek defaults, overridable through the environment

import os

INDEX_FILE   = os.environ.get("DOCSEEK_INDEX_FILE", "index.json")
RESULT_LIMIT = int(os.environ.get("DOCSEEK_RESULT_LIMIT", "10"))
WORKERS      = int(os.environ.get("DOCSEEK_WORKERS", "1"))
HOST         = os.environ.get("DOCSEEK_HOST", "127.0.0.1")
PORT         = int(os.environ.get("DOCSEEK_PORT", "6969"))
LOG_LEVEL    = os.environ.get("DOCSEEK_LOG_LEVEL", "INFO").upper()

SUPPORTED_EXTENSIONS = {".xhtml", ".html", ".htm", ".xml"}

LOG_FORMAT  = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"
