# Shared pytest fixtures for rvc tests

import pytest
import os
import sys
import shutil
import tempfile

# Add rvc-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'rvc-project'))

from utils import repository


def write_file(root, rel_path, content):
    # Writes content to root/rel_path, creating parent directories
    path = os.path.join(root, *rel_path.split('/'))
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', newline='') as f:
        f.write(content)
    return path


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = os.path.realpath(tempfile.mkdtemp())
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_tree(temp_dir):
    # A small working tree, not yet under version control
    write_file(temp_dir, 'README.md', '# Test Project\n')
    write_file(temp_dir, 'src/main.py', 'print("one")\nprint("two")\n')
    write_file(temp_dir, 'src/lib/util.py', 'def util():\n    return 1\n')
    return temp_dir


@pytest.fixture
def temp_repo(temp_tree):
    # A saved repository over temp_tree, with cwd inside it
    original_dir = os.getcwd()
    os.chdir(temp_tree)

    repo = repository.Repository.create('test', temp_tree)
    repo.save()

    yield temp_tree

    os.chdir(original_dir)


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
