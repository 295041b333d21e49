import sys
from pathlib import Path

import pytest

# Ensure src/ is on sys.path for local test runs without installation
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from svs.config.config import ExtractConfig  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast unit tests")
    config.addinivalue_line(
        "markers",
        "integration: tests that touch the filesystem end to end or run the CLI",
    )
    config.addinivalue_line("markers", "slow: slow-running tests")


@pytest.fixture
def datadir(tmp_path: Path) -> Path:
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def extract_config(datadir: Path) -> ExtractConfig:
    """Configuration writing into an isolated output root."""
    return ExtractConfig(datadir=datadir, files_per_dir=512, workers=2)
