# Test the deployment settings

import pytest
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'app'))
from unittest.mock import patch
import config

def test_default_horizon():
    with patch("config.REPEAT_MAX_END_DATE", "2025-12-31"):
        assert config.get_repeat_horizon() == "2025-12-31"

@pytest.mark.parametrize("horizon", ["2025/12/31", "2025-02-30", "2025", ""])
def test_invalid_horizon(horizon):
    with patch("config.REPEAT_MAX_END_DATE", horizon):
        with pytest.raises(ValueError):
            config.get_repeat_horizon()

def test_check_repeat_horizon_returns_valid_date():
    assert config.check_repeat_horizon("9999-12-31") == "9999-12-31"
