"""Main entry point for scriptbot when run as a module"""

# ── Must run BEFORE any third-party imports ─────────────────────────────────
import logging
import sys

# Force UTF-8 output on Windows (emoji in replies)
if sys.stdout.encoding and sys.stdout.encoding.lower() not in ('utf-8', 'utf8'):
    try:
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')
        sys.stderr.reconfigure(encoding='utf-8', errors='replace')
    except AttributeError:
        pass

# ── Root logger ──────────────────────────────────────────────────────────────
logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')

# ── Silence specific verbose libraries ──────────────────────────────────────
for _noisy in ('urllib3', 'primp', 'httpx', 'httpcore', 'ddgs'):
    logging.getLogger(_noisy).setLevel(logging.ERROR)

from scriptbot.cli import main

if __name__ == '__main__':
    main()
