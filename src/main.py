"""Command line entry point for operational checks."""

import argparse
import logging
import sys

from src.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def list_folders(user: str) -> int:
    """Print the user's project folders, one per line."""
    from src.folders import ProjectFolderLookup

    folders = ProjectFolderLookup().fetch(user)
    logger.info(f"Found {len(folders)} project folders for {user}")
    for folder in folders:
        print(f"{folder.id}\t{folder.name}")
    return 0


def generate(prompt: str) -> int:
    """Send one prompt through the structure chain and print the result."""
    from src.chains import StructureGeneratorChain

    result = StructureGeneratorChain().generate(prompt)
    print(result)
    return 0


def main():
    """Main function for the operator CLI."""
    parser = argparse.ArgumentParser(description="Article Studio operator tools")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    folders_parser = subparsers.add_parser("folders", help="List a user's project folders")
    folders_parser.add_argument(
        "--user",
        type=str,
        default=None,
        help="Owner email (uses MY_EMAIL if not specified)",
    )

    generate_parser = subparsers.add_parser("generate", help="Run one completion")
    generate_parser.add_argument("--prompt", type=str, required=True, help="Prompt text")

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.command == "folders":
            user = args.user or settings.my_email
            if not user:
                logger.error("No user specified. Use --user or set MY_EMAIL")
                sys.exit(1)
            sys.exit(list_folders(user))
        else:
            sys.exit(generate(args.prompt))

    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
