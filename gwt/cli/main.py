"""Command-line interface for gwt"""

import os
import sys
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

from gwt.cli.args import parse_args
from gwt.config import Config
from gwt.constants import ENV_CD_FILE, ENV_SELECTOR, HELP_COMMANDS, USAGE_TEXT
from gwt.core import WorktreeManager
from gwt.exceptions import GwtError, InvalidArgumentsError, UnknownCommandError
from gwt.logging_config import get_logger, setup_logging
from gwt.models.result import CommandResult
from gwt.services.dependency_service import check_dependencies
from gwt.services.ignore_service import IgnoreRuleService
from gwt.services.repository_service import RepositoryService
from gwt.services.selector_service import Selector

# stdout is reserved for the selected worktree path
console = Console(stderr=True)
logger = get_logger(__name__)


def print_usage() -> None:
    console.print(USAGE_TEXT, markup=False, highlight=False)


def build_config(parsed_args, environ=None) -> Config:
    """Build the run configuration from parsed arguments and the environment."""
    environ = os.environ if environ is None else environ
    cd_file = parsed_args.cd_file or environ.get(ENV_CD_FILE) or None
    kwargs = {}
    if environ.get(ENV_SELECTOR):
        kwargs["selector_binary"] = environ[ENV_SELECTOR]
    return Config(
        cd_file=Path(cd_file) if cd_file else None,
        verbose=parsed_args.verbose,
        debug=parsed_args.debug,
        **kwargs,
    )


def resolve_manager(config: Config, selector: Optional[Selector] = None) -> WorktreeManager:
    """Resolve the repository of the current directory and wrap it in a manager."""
    repo_root = RepositoryService(os.getcwd()).get_root()
    return WorktreeManager(repo_root, config, selector=selector)


def run_setup(config: Config) -> CommandResult:
    update = IgnoreRuleService(config).ensure_ignored()

    result = CommandResult()
    if update.registered:
        result.add(f"Global gitignore not found. Creating global gitignore at: {update.ignore_file}")
    if update.added_pattern:
        result.add(f"Added '{update.pattern}' to global gitignore: {update.ignore_file}")
    else:
        result.add(f"The '{update.pattern}' directory is already in the global gitignore.")
    return result


def dispatch(command: Optional[str], args: List[str], config: Config,
             manager_factory: Optional[Callable[[Config], WorktreeManager]] = None) -> CommandResult:
    """Run one command and return its result.

    Args:
        command: First token of the invocation, None for the default switch
        args: Remaining tokens
        config: Run configuration
        manager_factory: Builds the WorktreeManager; resolves the current
            repository by default. Only called once arguments are valid.

    Raises:
        GwtError: Any failure; the caller decides how to report it
    """
    manager_factory = manager_factory or resolve_manager

    if command is None:
        return manager_factory(config).switch()

    if command in HELP_COMMANDS:
        print_usage()
        return CommandResult()

    if command == "add":
        if len(args) != 2:
            raise InvalidArgumentsError("The 'add' command requires <dir-name> and <branch-name>.")
        dir_name, branch_name = args
        return manager_factory(config).add(dir_name, branch_name)

    if command == "remove":
        if args:
            raise InvalidArgumentsError("The 'remove' command takes no arguments.")
        return manager_factory(config).remove()

    if command == "setup":
        if args:
            raise InvalidArgumentsError("The 'setup' command takes no arguments.")
        return run_setup(config)

    raise UnknownCommandError(command)


def emit_result(result: CommandResult, config: Config) -> None:
    """Show messages and hand the directory change to the shell wrapper."""
    for message in result.messages:
        style = "green" if result.chdir else None
        console.print(escape(message), style=style, soft_wrap=True, highlight=False)

    if not result.chdir:
        return
    if config.cd_file:
        config.cd_file.write_text(result.chdir + "\n", encoding="utf-8")
    else:
        # Plain path on stdout so `cd "$(gwt)"` works
        print(result.chdir)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    debug = False
    try:
        try:
            parsed_args = parse_args(argv)
        except UnknownCommandError:
            print_usage()
            raise

        debug = parsed_args.debug
        setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

        try:
            config = build_config(parsed_args)
        except ValueError as e:
            raise InvalidArgumentsError(str(e)) from e

        if config.debug:
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}", highlight=False)

        check_dependencies(config)

        command = "help" if parsed_args.help else parsed_args.command
        logger.debug(f"Dispatching command={command!r} args={parsed_args.args!r}")
        try:
            result = dispatch(command, parsed_args.args, config)
        except (InvalidArgumentsError, UnknownCommandError):
            print_usage()
            raise

        emit_result(result, config)
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except GwtError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True, highlight=False)
        if debug:
            console.print_exception()
        return 1
    except Exception as e:
        console.print(f"[red]Unexpected error: {escape(str(e))}[/red]", soft_wrap=True, highlight=False)
        if debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
