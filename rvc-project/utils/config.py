# What it does: Manages all read/write operations for the `.rvc/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

from .errors import ConfigError, NotARepositoryError
from .state import METADATA_DIR
from .walker import DEFAULT_MAX_DEPTH

DEFAULT_ENCODING = 'utf-8'


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return os.path.join(repo_root, METADATA_DIR, 'config')


def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object
    config = configparser.ConfigParser()
    if not repo_root:
        return config

    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    if not repo_root or not os.path.isdir(os.path.join(repo_root, METADATA_DIR)):
        raise NotARepositoryError("not an rvc repository")

    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ConfigError(f"invalid key '{key}', should be 'section.key'")

    config = read_config(repo_root)
    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(get_config_path(repo_root), 'w') as configfile:
        config.write(configfile)


def get_max_depth(repo_root): # Retrieves core.max_depth, the deepest directory nesting the tree walker accepts
    config = read_config(repo_root)
    try:
        max_depth = config.getint('core', 'max_depth', fallback=DEFAULT_MAX_DEPTH)
    except ValueError:
        raise ConfigError("core.max_depth must be an integer")
    if max_depth < 0:
        raise ConfigError("core.max_depth must not be negative")
    return max_depth


def get_encoding(repo_root): # Retrieves core.encoding, used to decode tracked files
    config = read_config(repo_root)
    return config.get('core', 'encoding', fallback=DEFAULT_ENCODING)
