"""Shared constants for gwt."""

# Executables gwt drives
GIT_BINARY = "git"
DEFAULT_SELECTOR_BINARY = "fzf"

# Worktree layout
DEFAULT_CONTAINER_DIR = ".worktrees"

# Global git configuration
EXCLUDES_FILE_KEY = "core.excludesfile"
DEFAULT_GLOBAL_IGNORE_NAME = ".gitignore_global"

# Selector presentation
SELECTOR_PROMPT = "Select the worktree: "
SELECTOR_HEIGHT = "40%"

# fzf exit statuses that mean "nothing chosen" (no match, dismissed with Esc/Ctrl-C)
SELECTOR_CANCEL_CODES = (1, 130)

# Environment variables read by the CLI
ENV_CD_FILE = "GWT_CD_FILE"
ENV_SELECTOR = "GWT_SELECTOR"

# Worktree labels for entries without a branch
LABEL_DETACHED = "detached HEAD"
LABEL_BARE = "bare"

NO_SELECTION_MESSAGE = "No worktree selected."

HELP_COMMANDS = ("help", "--help", "-h")

USAGE_TEXT = """\
gwt - A tool to help with git worktree basic commands.

USAGE:
    gwt [OPTIONS] [COMMAND]

COMMANDS:
    add <dir-name> <branch-name>
        Create a new worktree. If the branch does not exist it is created
        from the current HEAD. The worktree is placed in
        <git-root>/.worktrees/<dir-name>.

    remove
        List the existing worktrees and remove the selected one.

    setup
        Configure git to globally ignore the '.worktrees' directory.

    help, --help, -h
        Show this help message.

With no command, gwt lists the existing worktrees so you can switch to one.

OPTIONS:
    -v, --verbose      Show verbose output
    --debug            Show debug information for troubleshooting
    --cd-file FILE     Write the selected worktree path to FILE (or set GWT_CD_FILE)
    --version          Show the version and exit

SHELL INTEGRATION:
    A program cannot change the directory of the shell that started it. Wrap
    gwt in a shell function that reads the path back, for example:

        gwt() {
            local cd_file
            cd_file=$(mktemp) || return 1
            GWT_CD_FILE="$cd_file" command gwt "$@"
            local status=$?
            [ -s "$cd_file" ] && cd "$(cat "$cd_file")"
            rm -f "$cd_file"
            return $status
        }
"""
