import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pydantic import ValidationError as PydanticValidationError

from jgf.config import Settings, get_settings, settings


class TestSettings:
    """Test settings loading."""
    
    def test_defaults(self, monkeypatch):
        for var in ['JGF_LOG_LEVEL', 'JGF_PRETTY_PRINT_SPACES', 'JGF_CASCADE_NODE_REMOVAL',
                    'JGF_LEGACY_FORCE_DIRECTED']:
            monkeypatch.delenv(var, raising=False)
        
        defaults = Settings(_env_file=None)
        
        assert defaults.pretty_print_spaces == 4
        assert defaults.cascade_node_removal is False
        assert defaults.legacy_force_directed is False
        assert defaults.log_file is None
    
    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv('JGF_CASCADE_NODE_REMOVAL', 'true')
        monkeypatch.setenv('JGF_PRETTY_PRINT_SPACES', '2')
        monkeypatch.setenv('JGF_LOG_LEVEL', 'debug')
        
        overridden = Settings(_env_file=None)
        
        assert overridden.cascade_node_removal is True
        assert overridden.pretty_print_spaces == 2
        assert overridden.log_level == 'DEBUG'
    
    def test_negative_indent_rejected(self, monkeypatch):
        monkeypatch.setenv('JGF_PRETTY_PRINT_SPACES', '-1')
        
        with pytest.raises(PydanticValidationError):
            Settings(_env_file=None)
    
    def test_get_settings(self):
        assert get_settings() is settings
