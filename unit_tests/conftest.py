import pytest
import sys
from pathlib import Path

# Add root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from scoring.config import ScoringSettings


@pytest.fixture
def lenient_settings():
    return ScoringSettings(strict_tags=False)


@pytest.fixture
def strict_settings():
    return ScoringSettings(strict_tags=True)
