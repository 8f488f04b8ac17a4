# Unit tests for utils/config.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'rvc-project'))

from utils import config as config_utils
from utils.errors import ConfigError, NotARepositoryError
from utils.walker import DEFAULT_MAX_DEPTH


class TestConfig:
    # Tests for reading and writing .rvc/config

    def test_defaults(self, temp_repo):
        assert config_utils.get_max_depth(temp_repo) == DEFAULT_MAX_DEPTH
        assert config_utils.get_encoding(temp_repo) == 'utf-8'

    def test_write_and_read(self, temp_repo):
        config_utils.write_config(temp_repo, 'core.max_depth', '5')
        config_utils.write_config(temp_repo, 'core.encoding', 'latin-1')

        assert config_utils.get_max_depth(temp_repo) == 5
        assert config_utils.get_encoding(temp_repo) == 'latin-1'
        assert os.path.exists(config_utils.get_config_path(temp_repo))

    def test_invalid_key(self, temp_repo):
        with pytest.raises(ConfigError):
            config_utils.write_config(temp_repo, 'nodot', 'x')

    def test_not_an_integer(self, temp_repo):
        config_utils.write_config(temp_repo, 'core.max_depth', 'deep')
        with pytest.raises(ConfigError):
            config_utils.get_max_depth(temp_repo)

    def test_negative_depth(self, temp_repo):
        config_utils.write_config(temp_repo, 'core.max_depth', '-1')
        with pytest.raises(ConfigError):
            config_utils.get_max_depth(temp_repo)

    def test_write_outside_repository(self, temp_dir):
        with pytest.raises(NotARepositoryError):
            config_utils.write_config(temp_dir, 'core.max_depth', '5')

    def test_read_without_repository(self):
        assert config_utils.read_config(None).sections() == []
