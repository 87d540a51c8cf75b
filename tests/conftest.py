import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

# Setup test imports
test_root = Path(__file__).parent.parent
sys.path.insert(0, str(test_root))
