#!/usr/bin/env python3
"""
Knowledge Manager - CLI Entry Point
===================================
Lists, shows, adds and deletes knowledge in a ``tag : text`` file.

Without --file the backup file is used. Every change is written back to
--file (if given) and to the backup file.

Usage:
    python -m knowledge_base.cli.main list
    python -m knowledge_base.cli.main --file notes.txt show work
    python -m knowledge_base.cli.main --file notes.txt add "finish the report" --tags work,todo
    python -m knowledge_base.cli.main --file notes.txt delete work
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional
from controller import ActionResult, KnowledgeController
from knowledge_base._logging import configure_logging
from knowledge_base.core.tags import split_tag_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knowledge-base",
        description="Store short knowledge snippets under one or more tags.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list
  %(prog)s --file notes.txt show work
  %(prog)s --file notes.txt add "finish the report" --tags work,todo
  %(prog)s --file notes.txt delete work
        """
    )

    parser.add_argument(
        "--file", "-f",
        type=Path,
        help="Knowledge file (default: the backup file)"
    )

    parser.add_argument(
        "--backup", "-b",
        type=Path,
        help="Backup file (default: from config, knowledge_backup.txt)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all tags")

    show = subparsers.add_parser("show", help="Print the knowledge of a tag")
    show.add_argument("tag", help="Tag to show")

    add = subparsers.add_parser("add", help="Add knowledge under one or more tags")
    add.add_argument("text", help="Knowledge text ('-' reads stdin)")
    add.add_argument(
        "--tags", "-t",
        required=True,
        help="Comma-separated tags"
    )

    delete = subparsers.add_parser("delete", help="Delete a tag")
    delete.add_argument("tag", help="Tag to delete")

    return parser


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def _save(controller: KnowledgeController, path: Optional[Path]) -> int:
    result: ActionResult = controller.save_knowledge(path)
    if not result.success:
        return _fail(result.message)
    if result.error:
        print(f"Warning: {result.error}", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    controller = KnowledgeController(backup_path=args.backup)

    if args.file and not args.file.exists():
        # Only add may create a new file; it starts from an empty store
        if args.command != "add":
            return _fail(f"File not found: {args.file}")
    else:
        result = controller.load_knowledge(args.file)
        if not result.success:
            return _fail(result.message)

    if args.command == "list":
        for tag in controller.tags():
            print(tag)
        return 0

    if args.command == "show":
        text = controller.get_knowledge(args.tag)
        if text is None:
            return _fail(f"Unknown tag: {args.tag}")
        print(text)
        return 0

    if args.command == "add":
        text = sys.stdin.read().rstrip("\n") if args.text == "-" else args.text
        result = controller.add_knowledge(text, split_tag_text(args.tags))
        if not result.success:
            return _fail(result.message)
        print(result.message)
        return _save(controller, args.file)

    if args.command == "delete":
        result = controller.delete_tag(args.tag)
        if not result.success:
            return _fail(f"Unknown tag: {args.tag}")
        print(result.message)
        return _save(controller, args.file)

    return _fail(f"Unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
