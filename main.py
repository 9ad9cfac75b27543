"""
Entry point for coursepack.

Run with:
    python main.py                 # scan the configured content root
    python main.py scan data/
    python main.py show data/ math
"""
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from config import get_settings
from coursepack.cli.main import app

if __name__ == "__main__":
    if len(sys.argv) == 1:
        sys.argv += ["scan", get_settings().content_root]
    app()
