"""Test configuration.

Provides:
- Python path setup so ``resultkit`` and ``examples`` import from the project root
"""

import sys
from pathlib import Path

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
