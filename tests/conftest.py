"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local beanprobe package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of beanprobe modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("beanprobe"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path) -> Iterator[Path]:
    """Point the global config at an empty location so a user's own file never leaks in."""
    global_path = tmp_path / "global" / "config.yaml"
    with patch("beanprobe.config.loader.GLOBAL_CONFIG_PATH", global_path):
        yield global_path
