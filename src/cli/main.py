"""Main CLI entry point for the missing references finder."""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from src.cli.commands.all_scenes import all_scenes_command
from src.cli.commands.assets import assets_command
from src.cli.commands.scene import scene_command
from src.cli.commands.serve import serve_command
from src.cli.config import Config
from src.utils.logging_config import setup_logging


def _add_common_arguments(parser: argparse.ArgumentParser, scan: bool = True):
    parser.add_argument("--config", help="Path to .env configuration file", default=None)
    parser.add_argument("--project", help="Unity project directory (default: UNITY_PROJECT_DIR or .)", default=None)
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress messages",
    )
    if scan:
        parser.add_argument(
            "--fail-on-findings",
            action="store_true",
            help="Exit with status 1 when any missing reference is found",
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="missing-refs",
        description="Missing References Finder - report missing components and object references in Unity projects",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Scene command
    scene_parser = subparsers.add_parser("scene", help="Search one scene for missing references")
    scene_parser.add_argument("scene_path", help="Project-relative scene path, e.g. Assets/Scenes/Main.unity")
    _add_common_arguments(scene_parser)

    # All-scenes command
    all_scenes_parser = subparsers.add_parser(
        "all-scenes", help="Search every enabled scene in the build settings, one at a time"
    )
    _add_common_arguments(all_scenes_parser)

    # Assets command
    assets_parser = subparsers.add_parser("assets", help="Search prefab assets for missing references")
    _add_common_arguments(assets_parser)

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start MCP server exposing the search tools")
    _add_common_arguments(serve_parser, scan=False)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging(verbose=args.verbose)

    # Load configuration
    config = Config(args.config)

    # Execute command
    if args.command == "scene":
        scene_command(
            config=config,
            scene_path=args.scene_path,
            project_dir=args.project,
            fail_on_findings=args.fail_on_findings,
        )
    elif args.command == "all-scenes":
        all_scenes_command(config=config, project_dir=args.project, fail_on_findings=args.fail_on_findings)
    elif args.command == "assets":
        assets_command(config=config, project_dir=args.project, fail_on_findings=args.fail_on_findings)
    elif args.command == "serve":
        serve_command(config, project_dir=args.project, verbose=args.verbose)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
