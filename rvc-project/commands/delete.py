# The command: rvc delete [<name>]
# What it does: Deletes the repository's metadata (the `.rvc` directory). The files of the working tree are kept
# How it does: Opens the enclosing repository, checks the optional name against it and removes the metadata directory

import sys
from utils import repository
from utils.errors import RvcError


def run(args):
    try:
        repo = repository.Repository.open()
        if args.name and args.name != repo.name:
            print(f"fatal: there is no repository named '{args.name}' here (found '{repo.name}')", file=sys.stderr)
            sys.exit(1)
        repo.delete()
    except (RvcError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Deleted repository '{repo.name}' ({repo.path})")
