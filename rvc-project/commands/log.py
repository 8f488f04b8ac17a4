# The command: rvc log
# What it does: Displays the commit history, newest first
# How it does: The log is a plain list, so it is read back to front; every entry shows its revision number, time, name and how many files it created, deleted and modified
# What data structure it uses: List (the append-only commit log, index = revision)

import sys
import time
from utils import repository
from utils.errors import RvcError


def run(args):
    try:
        repo = repository.Repository.open()
    except (RvcError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if not repo.commits:
        print(f"fatal: repository '{repo.name}' does not have any commits yet")
        return

    for index in reversed(range(len(repo.commits))):
        commit = repo.commits[index]
        marker = ' (checkout)' if index == repo.head else ''
        print(f"revision {index}{marker}")
        print(f"Date: {format_timestamp(commit.timestamp)}")
        print()
        print(f"    {commit.name}")
        print(f"    {len(commit.created)} created, {len(commit.deleted)} deleted, {len(commit.filemods)} modified")
        print()


def format_timestamp(timestamp):
    return time.strftime('%Y-%m-%d %H:%M:%S %z', time.localtime(timestamp))
