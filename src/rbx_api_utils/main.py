"""Command-line inspector for API dumps."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .domain.errors import ApiUtilsError
from .domain.models.api import MemberFilter, MemberKind
from .domain.services import ApiIndex
from .infrastructure.config import Config
from .infrastructure.dump_loader import load_api_dump
from .infrastructure.logging import LoggerSetup, ProgressTracker, get_logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Inspect classes, members and enums of a JSON API dump",
        epilog="""
Examples:
  # Show the inheritance chain of a class
  rbx-api-utils API-Dump.json --hierarchy Part

  # List properties of a class, including inherited ones
  rbx-api-utils API-Dump.json --members Part

  # List only functions declared on the class itself
  rbx-api-utils API-Dump.json --members Part --kind Function --no-inherited

  # Show the items of an enum
  rbx-api-utils API-Dump.json --enum Material

  # Using .env file for configuration
  echo 'API_DUMP_PATH=API-Dump.json' > .env
  rbx-api-utils --hierarchy Part
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "dump_file",
        type=Path,
        nargs="?",
        help="Path to the JSON API dump (optional if using .env)",
    )
    parser.add_argument(
        "--hierarchy",
        metavar="CLASS",
        help="Print the inheritance chain of CLASS",
    )
    parser.add_argument(
        "--members",
        metavar="CLASS",
        help="Print members of CLASS grouped by declaring class",
    )
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in MemberKind],
        default=MemberKind.PROPERTY.value,
        help="Member kind listed by --members (default: Property)",
    )
    parser.add_argument(
        "--no-inherited",
        action="store_true",
        help="Only list members declared on the class itself",
    )
    parser.add_argument(
        "--keep-overridden",
        action="store_true",
        help="Also list ancestor members shadowed by a subclass",
    )
    parser.add_argument(
        "--enum",
        metavar="NAME",
        help="Print the items of enum NAME",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Also write a debug log file to this directory",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with debug logs",
    )
    return parser.parse_args(argv)


def print_hierarchy(api_index: ApiIndex, class_name: str) -> bool:
    hierarchy = api_index.get_class_hierarchy(class_name)
    if hierarchy is None:
        print(f"Unknown class: {class_name}", file=sys.stderr)
        return False

    print(" -> ".join(hierarchy))
    return True


def print_members(
    api_index: ApiIndex,
    class_name: str,
    member_type: str,
    member_filter: MemberFilter,
) -> bool:
    members = api_index.get_class_members(class_name, member_type, member_filter)
    if members is None:
        print(f"Unknown class: {class_name}", file=sys.stderr)
        return False

    for owner_name, class_members in members.items():
        if not class_members:
            continue

        native = "" if api_index.is_class_native(owner_name) else " (added)"
        print(f"{owner_name}{native}:")
        for member in class_members:
            value_type = member.get("ValueType") or member.get("ReturnType")
            suffix = f": {value_type.get('Name')}" if value_type else ""
            print(f"  {member['Name']}{suffix}")
    return True


def print_enum(api_index: ApiIndex, enum_name: str) -> bool:
    enum_data = api_index.get_enum_data(enum_name)
    if enum_data is None:
        print(f"Unknown enum: {enum_name}", file=sys.stderr)
        return False

    print(f"{enum_name}:")
    for item in enum_data["Items"]:
        print(f"  {item['Name']} = {item['Value']}")
    return True


def run_queries(api_index: ApiIndex, args: argparse.Namespace) -> bool:
    """Print every requested query. Returns False if any name was unknown."""
    ok = True
    if args.hierarchy:
        ok = print_hierarchy(api_index, args.hierarchy) and ok
    if args.members:
        member_filter = MemberFilter(
            include_inherited_members=not args.no_inherited,
            remove_overridden_members=not args.keep_overridden,
        )
        ok = print_members(api_index, args.members, args.kind, member_filter) and ok
    if args.enum:
        ok = print_enum(api_index, args.enum) and ok
    return ok


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for API dump inspection."""
    args = parse_args(argv)

    try:
        config = Config.from_args(
            dump_file_path=args.dump_file,
            verbose=args.verbose or None,
            log_dir=args.log_dir,
        )
        config.validate()
    except (OSError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    LoggerSetup.initialize(config.log_dir, verbose=config.verbose)
    logger = get_logger(__name__)
    logger.debug(f"API dump: {config.dump_file_path}")

    if not (args.hierarchy or args.members or args.enum):
        logger.error("Must provide at least one of --hierarchy, --members or --enum")
        sys.exit(1)

    tracker = ProgressTracker(logger)
    try:
        with tracker.track_operation("Loading API dump"):
            api_dump = load_api_dump(config.dump_file_path)
        with tracker.track_operation("Indexing API dump"):
            api_index = ApiIndex(api_dump)
    except ApiUtilsError as e:
        logger.error(f"Could not index {config.dump_file_path}: {e}")
        sys.exit(1)

    tracker.report_summary(len(api_index.class_names()), len(api_index.enum_names()))
    if config.verbose:
        tracker.log_memory_usage()

    with tracker.track_operation("Answering queries"):
        try:
            ok = run_queries(api_index, args)
        except ApiUtilsError as e:
            logger.error(f"Query failed during {tracker.get_current_context()}: {e}")
            sys.exit(1)

    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
