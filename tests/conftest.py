from __future__ import annotations

import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

# tools/ holds scripts, not an installed package
TOOLS_DIR = Path(__file__).resolve().parents[1] / "tools"
if str(TOOLS_DIR) not in sys.path:
    sys.path.insert(0, str(TOOLS_DIR))
