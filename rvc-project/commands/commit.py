# The command: rvc commit <name>
# What it does: Records every change made to the working tree since the last checkout as a new, named commit
# How it does: The Diff Engine compares the checkout cache with the files on disk and produces the created files, the deleted paths and a line-level edit script for every modified file. The commit is appended to the log, the checkout is replayed and the repository is saved
# What data structure it uses: Set (path classification), Dictionary (created files), List (the append-only commit log)

import sys
from utils import repository
from utils.errors import NoChangesError, RvcError


def run(args):
    try:
        repo = repository.Repository.open()
    except (RvcError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        new_commit = repo.commit(args.name)
        repo.save()
    except NoChangesError as e:
        print(str(e))
        sys.exit(1)
    except (RvcError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"[{repo.name} {repo.head}] {new_commit.name}")
    print(
        f" {len(new_commit.created)} created, {len(new_commit.deleted)} deleted, "
        f"{len(new_commit.filemods)} modified"
    )
