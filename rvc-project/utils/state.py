# What it does: Provides centralized read/write operations for the .rvc/state.json file
# How it does: The whole repository (name, path, head, commit log, checkout cache) is serialized as one JSON document and rewritten wholesale on every save. Writes go to a temporary file first and are moved into place with os.replace, so a failed save never leaves a half-written state behind
# What data structure it uses: Dictionary (the JSON document)

import json
import logging
import os
import tempfile

logger = logging.getLogger(__name__)

METADATA_DIR = '.rvc'
STATE_FILE = 'state.json'


def get_metadata_dir(repo_root):
    return os.path.join(repo_root, METADATA_DIR)


def get_state_path(repo_root):
    return os.path.join(repo_root, METADATA_DIR, STATE_FILE)


def read_state(repo_root):
    """
    Reads the state file and returns its dictionary.
    Returns None when the file is missing or cannot be parsed.
    """
    state_path = get_state_path(repo_root)
    if not os.path.exists(state_path):
        return None

    try:
        with open(state_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (ValueError, UnicodeDecodeError) as e:
        logger.warning("ignoring unparsable state file %s: %s", state_path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("ignoring state file %s: expected a JSON object", state_path)
        return None
    return data


def write_state(repo_root, data):
    metadata_dir = get_metadata_dir(repo_root)
    os.makedirs(metadata_dir, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(prefix='state.', suffix='.tmp', dir=metadata_dir)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, sort_keys=True, ensure_ascii=False)
            f.write('\n')
        os.replace(tmp_path, get_state_path(repo_root))
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
    logger.debug("wrote %s", get_state_path(repo_root))
