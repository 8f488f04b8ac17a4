import argparse
import logging
from commands import (
    create, commit, checkout, delete, status, log, show, config, unsupported
)
# The main entry point for the rvc version control system
def main(argv=None):
    # The main parser
    parser = argparse.ArgumentParser(description="rvc: a minimal, local version control system.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print debug logging.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: create
    create_parser = subparsers.add_parser("create", help="Create a repository and record the directory's current content.")
    create_parser.add_argument("name", help="The name of the repository.")
    create_parser.add_argument("path", nargs="?", help="The directory to track (defaults to the current directory).")
    create_parser.set_defaults(func=create.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", help="Record the changes made to the working tree.")
    commit_parser.add_argument("name", help="The name of the commit.")
    commit_parser.set_defaults(func=commit.run)

    # Command: checkout
    checkout_parser = subparsers.add_parser("checkout", help="Rebuild the checkout as of a revision.")
    checkout_parser.add_argument("revision", help="A revision number, or 'latest'.")
    checkout_parser.set_defaults(func=checkout.run)

    # Command: delete
    delete_parser = subparsers.add_parser("delete", help="Delete the repository metadata (keeps the working tree).")
    delete_parser.add_argument("name", nargs="?", help="The name of the repository, checked before deleting.")
    delete_parser.set_defaults(func=delete.run)

    # Command: status
    status_parser = subparsers.add_parser("status", help="Show the repository summary and uncommitted changes.")
    status_parser.set_defaults(func=status.run)

    # Command: log
    log_parser = subparsers.add_parser("log", help="Show the commit log.")
    log_parser.set_defaults(func=log.run)

    # Command: show
    show_parser = subparsers.add_parser("show", help="Show the changes recorded by one commit.")
    show_parser.add_argument("index", type=int, help="The revision number.")
    show_parser.set_defaults(func=show.run)

    # Command: config
    config_parser = subparsers.add_parser("config", help="Set a repository configuration value.")
    config_parser.add_argument("key", help="The configuration key (e.g., core.max_depth).")
    config_parser.add_argument("value", help="The configuration value.")
    config_parser.set_defaults(func=config.run)

    # Commands that are not supported yet
    for name, help_text in unsupported.COMMANDS.items():
        unsupported_parser = subparsers.add_parser(name, help=help_text)
        unsupported_parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)
        unsupported_parser.set_defaults(func=unsupported.run)

    # Parse the arguments
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # If a command was specified, run its function
    if hasattr(args, 'func'):
        args.func(args)
    else:
        parser.print_help()

if __name__ == "__main__":
    main()
