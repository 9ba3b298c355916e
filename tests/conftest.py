import pytest

from prose_metrics.engine import TextProcessor


@pytest.fixture
def processor() -> TextProcessor:
    return TextProcessor()
