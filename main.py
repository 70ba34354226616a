#!/usr/bin/env python3
"""
Entry point for RBX API Utils.

This file allows running the inspector directly from the project root:
    python main.py <api_dump.json> --hierarchy <class>
"""

import sys
from pathlib import Path

# Add src to path for development mode
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from rbx_api_utils.main import main

if __name__ == "__main__":
    main()
