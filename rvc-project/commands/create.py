# The command: rvc create <name> [path]
# What it does: Turns a directory into an rvc repository and records everything already in it as the "init" commit
# How it does: Repository.create walks the directory and builds the initial commit in memory; only then is the `.rvc` directory written. If that first save fails, the half-made `.rvc` directory is removed again
# What data structure it uses: Tree (the file system directory structure is a tree), List (the commit log, starting with one commit)

import os
import shutil
import sys
from utils import repository
from utils.errors import RvcError


def run(args):
    path = args.path or os.getcwd()

    try:
        repo = repository.Repository.create(args.name, path)
        try:
            repo.save()
        except BaseException:
            shutil.rmtree(repo.metadata_path, ignore_errors=True)
            raise
    except (RvcError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    init_commit = repo.commits[0]
    print(f"Created repository '{repo.name}' in {repo.metadata_path}/")
    print(f"[init] {len(init_commit.created)} file(s) tracked")
