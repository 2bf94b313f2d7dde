import sys
from pathlib import Path


# Make the project root importable (rm_barcode and the UI-side modules package)
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
