# scripts/run_stamp_manifests.py
from __future__ import annotations

import sys
from pathlib import Path

# ---------------------------------------------------------------------
# Ensure repo root is on PYTHONPATH so `import skatelib.*` works
# ---------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from skatelib.batch.stamp_manifests import main

if __name__ == "__main__":
    raise SystemExit(main(parameters_path=str(REPO_ROOT / "configs" / "parameters.yaml")))
