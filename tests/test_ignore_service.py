"""Tests for IgnoreRuleService"""
import git
import pytest

from gwt.config import Config
from gwt.services.ignore_service import IgnoreRuleService, has_ignore_line


def global_excludes_file():
    """Read core.excludesfile from the (isolated) global git config."""
    return git.Git().config("--global", "--get", "core.excludesfile").strip()


class TestHasIgnoreLine:
    """Test the full-line pattern match."""

    @pytest.mark.parametrize("content, expected", [
        (".worktrees\n", True),
        ("*.pyc\n.worktrees\nnode_modules\n", True),
        ("*.pyc\r\n.worktrees\r\n", True),
        (".worktrees", True),
        (".worktrees-old\n", False),
        ("#.worktrees\n", False),
        ("foo/.worktrees\n", False),
        ("", False),
    ])
    def test_has_ignore_line(self, content, expected):
        assert has_ignore_line(content, ".worktrees") is expected


class TestEnsureIgnored:
    """Test configuring the global ignore file."""

    def test_unset_config_creates_default_file(self, config, isolated_home):
        """Without core.excludesfile the default file is created and registered."""
        update = IgnoreRuleService(config).ensure_ignored()

        default = isolated_home / ".gitignore_global"
        assert update.ignore_file == default
        assert update.registered is True
        assert update.created_file is True
        assert update.added_pattern is True
        assert default.read_text() == ".worktrees\n"
        assert global_excludes_file() == str(default)

    def test_running_twice_keeps_one_line(self, config, isolated_home):
        service = IgnoreRuleService(config)

        service.ensure_ignored()
        second = service.ensure_ignored()

        assert second.registered is False
        assert second.created_file is False
        assert second.added_pattern is False
        lines = (isolated_home / ".gitignore_global").read_text().splitlines()
        assert lines.count(".worktrees") == 1

    def test_existing_file_is_appended_to(self, config, isolated_home):
        """Existing lines are kept and the pattern goes on a line of its own."""
        ignore_file = isolated_home / "my-ignores"
        ignore_file.write_text("*.pyc\n.DS_Store")  # no trailing newline
        git.Git().config("--global", "core.excludesfile", str(ignore_file))

        update = IgnoreRuleService(config).ensure_ignored()

        assert update.ignore_file == ignore_file
        assert update.registered is False
        assert ignore_file.read_text() == "*.pyc\n.DS_Store\n.worktrees\n"
        assert not (isolated_home / ".gitignore_global").exists()

    def test_tilde_path_is_expanded(self, config, isolated_home):
        git.Git().config("--global", "core.excludesfile", "~/.config/git/ignore")

        update = IgnoreRuleService(config).ensure_ignored()

        expected = isolated_home / ".config" / "git" / "ignore"
        assert update.ignore_file == expected
        assert update.created_file is True
        assert expected.read_text() == ".worktrees\n"
        # The configured value is left as the user wrote it
        assert global_excludes_file() == "~/.config/git/ignore"

    def test_similar_lines_do_not_count(self, config, isolated_home):
        """Only an exact line suppresses the append."""
        ignore_file = isolated_home / ".gitignore_global"
        ignore_file.write_text(".worktrees-old\n# .worktrees\n")
        git.Git().config("--global", "core.excludesfile", str(ignore_file))

        update = IgnoreRuleService(config).ensure_ignored()

        assert update.added_pattern is True
        assert ignore_file.read_text() == ".worktrees-old\n# .worktrees\n.worktrees\n"

    def test_pattern_already_present(self, config, isolated_home):
        ignore_file = isolated_home / ".gitignore_global"
        original = "*.log\n.worktrees\n*.swp\n"
        ignore_file.write_text(original)
        git.Git().config("--global", "core.excludesfile", str(ignore_file))

        update = IgnoreRuleService(config).ensure_ignored()

        assert update.added_pattern is False
        assert ignore_file.read_text() == original

    def test_custom_container_pattern(self, isolated_home):
        config = Config(container_dir=".trees", default_ignore_file=isolated_home / "ignore")

        IgnoreRuleService(config).ensure_ignored()

        assert (isolated_home / "ignore").read_text() == ".trees\n"

    def test_resolve_reads_git_config(self, config, isolated_home):
        """resolve_ignore_file only registers the default when git has nothing."""
        service = IgnoreRuleService(config)
        assert service.get_configured_ignore_file() is None

        path, registered = service.resolve_ignore_file()
        assert registered is True
        assert service.get_configured_ignore_file() == path
