# What it does: Implements the `.rvcignore` functionality
# What data structure it uses: Set (to store the ignore patterns for efficient, near O(1) average time complexity lookups)

import os
from fnmatch import fnmatch

from .state import METADATA_DIR

IGNORE_FILE = '.rvcignore'


def get_ignored_patterns(repo_root):
    """
    Reads the .rvcignore file and returns a set of glob patterns.
    """
    ignore_file = os.path.join(repo_root, IGNORE_FILE)
    patterns = {METADATA_DIR, METADATA_DIR + '/*'} # Always ignore the repository metadata

    if os.path.exists(ignore_file):
        with open(ignore_file, 'r') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    patterns.add(line)
    return patterns


def is_metadata(rel_path): # True for the metadata directory and everything inside it
    return rel_path == METADATA_DIR or rel_path.startswith(METADATA_DIR + '/')


def is_ignored(rel_path, ignore_patterns): # Returns True if the path (relative, '/'-separated) matches any ignore pattern
    if is_metadata(rel_path):
        return True
    for pattern in ignore_patterns:
        if fnmatch(rel_path, pattern) or any(fnmatch(part, pattern) for part in rel_path.split('/')):
            return True
    return False
