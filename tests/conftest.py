"""
Pytest configuration.

Routes log files to a throwaway directory before any oa_formatter import,
since loggers attach their handlers at import time.
"""

import os
import tempfile

os.environ.setdefault("OA_FORMATTER_LOG_DIR", tempfile.mkdtemp(prefix="oa-formatter-logs-"))
