"""Non-interactive command line interface.

Thin presentation over ProfileSwitchService: one action per invocation,
confirmation on stdout, ``Error: <reason>`` on stderr.
"""

import argparse
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from . import __version__
from .config import SwitchSettings
from .errors import ProfileAlreadyActiveError, ProfileSwitchError
from .models.schemas import ActiveProfileStatus
from .profiles.templates import get_provider_templates
from .service import ProfileSwitchService, build_create_options
from .utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

PROG_NAME = "settings-switch"


class CLIError(Exception):
    """Exception raised for invalid argument combinations."""

    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Switch between named copies of the live settings file.",
    )
    parser.add_argument("profile", nargs="?", help="Profile to switch to")
    parser.add_argument(
        "-V", "--version", action="version", version=__version__,
        help="output the version number",
    )
    parser.add_argument("--switch", metavar="NAME", help="Switch to a different profile")
    parser.add_argument(
        "--create", metavar="NAME", help="Create a new profile from current settings"
    )
    parser.add_argument(
        "--template", metavar="TEMPLATE", help="Provider template for --create"
    )
    parser.add_argument("--api-key", metavar="KEY", help="Provider API key for --template")
    parser.add_argument("--delete", metavar="NAME", help="Delete a profile")
    parser.add_argument("--rename", nargs="+", metavar="NAME", help="Rename a profile")
    parser.add_argument("--to", metavar="NAME", help="New name for rename")
    parser.add_argument(
        "--current", action="store_true", help="Show the current active profile"
    )
    parser.add_argument("--list", action="store_true", help="List all profiles")
    parser.add_argument(
        "--templates", action="store_true", help="List available provider templates"
    )
    return parser


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def format_active_profile_line(status: ActiveProfileStatus) -> str:
    missing_suffix = "" if status.exists else " (missing)"
    return f'Current profile: "{status.name}"{missing_suffix}'


def _selected_actions(args: argparse.Namespace) -> list[str]:
    actions = []
    if args.switch is not None:
        actions.append("switch")
    if args.create is not None:
        actions.append("create")
    if args.delete is not None:
        actions.append("delete")
    if args.rename is not None or args.to is not None:
        actions.append("rename")
    if args.current:
        actions.append("current")
    if args.list:
        actions.append("list")
    if args.templates:
        actions.append("templates")
    return actions


def _rename_names(args: argparse.Namespace) -> tuple[str, str]:
    rename_args = args.rename or []
    if not rename_args and args.to is not None:
        raise CLIError("Missing old profile name for --rename")
    if len(rename_args) > 2:
        raise CLIError("Provide only two names for --rename")
    if len(rename_args) == 2 and args.to is not None:
        raise CLIError('Use either "--rename <old> <new>" or "--rename <old> --to <new>"')

    new_name = rename_args[1] if len(rename_args) == 2 else args.to
    if not new_name:
        raise CLIError("Missing new profile name for --rename")
    return rename_args[0], new_name


def _show_profile_list(service: ProfileSwitchService) -> None:
    status = service.get_active_profile_status()
    profiles = service.list_profiles()

    print(format_active_profile_line(status))
    if not profiles:
        print("No profiles found")
        return

    print("\nProfiles:")
    for profile in profiles:
        marker = " (active)" if profile.is_active else ""
        print(f"  {profile.name}{marker}")


def _show_templates() -> None:
    print("Templates:")
    for definition in get_provider_templates():
        key_note = " (API key required)" if definition.requires_api_key else ""
        aliases = f" [aliases: {', '.join(definition.aliases)}]" if definition.aliases else ""
        print(f"  {definition.name.value}: {definition.label}{key_note}{aliases}")


def _run_action(
    action: str, args: argparse.Namespace, service: ProfileSwitchService
) -> None:
    if action == "switch":
        service.switch_profile(args.switch)
        print(f'Switched to profile "{args.switch}"')

    elif action == "create":
        options = build_create_options(args.template, args.api_key)
        service.create_profile(args.create, options)
        if options is not None and options.template is not None:
            print(
                f'Created profile "{args.create}" from template '
                f'"{options.template.value}" and switched to it'
            )
        else:
            print(f'Created profile "{args.create}"')

    elif action == "delete":
        service.delete_profile(args.delete)
        print(f'Deleted profile "{args.delete}"')

    elif action == "rename":
        old_name, new_name = _rename_names(args)
        service.rename_profile(old_name, new_name)
        print(f'Renamed profile "{old_name}" to "{new_name}"')

    elif action == "current":
        print(format_active_profile_line(service.get_active_profile_status()))

    elif action == "list":
        _show_profile_list(service)

    elif action == "templates":
        _show_templates()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command line interface.

    Args:
        argv: Arguments without the program name (defaults to sys.argv)

    Returns:
        Process exit code
    """
    raw_args = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if not raw_args:
        parser.print_help()
        return 0

    if len(raw_args) == 1 and raw_args[0] == "help":
        parser.print_help()
        return 0
    if len(raw_args) == 1 and raw_args[0] == "version":
        print(__version__)
        return 0

    try:
        args = parser.parse_args(raw_args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1

    actions = _selected_actions(args)
    if len(actions) > 1:
        print("Error: Please provide only one action flag at a time.", file=sys.stderr)
        return 1
    if args.profile and actions:
        print("Error: Do not combine a profile name with action flags.", file=sys.stderr)
        return 1
    if (args.template is not None or args.api_key is not None) and actions != ["create"]:
        print("Error: --template and --api-key can only be used with --create.", file=sys.stderr)
        return 1

    if not actions and not args.profile:
        parser.print_help()
        return 0

    try:
        settings = SwitchSettings.from_environment()
    except ValidationError as e:
        print(f"Error: Invalid settings: {e}", file=sys.stderr)
        return 1

    setup_logging(
        config_path=settings.log_config,
        default_level=_resolve_level(settings.log_level),
        log_file=settings.log_file,
    )

    service = ProfileSwitchService(settings)
    if not actions:
        args.switch = args.profile
        actions = ["switch"]

    try:
        _run_action(actions[0], args, service)
    except ProfileAlreadyActiveError as e:
        print(e)
        return 0
    except (ProfileSwitchError, CLIError) as e:
        logger.debug(f"{actions[0]} failed: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
