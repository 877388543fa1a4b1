import pytest

from workstation_setup.errors import ConfigWriteError
from workstation_setup.lib.shell_profile import append_line, has_line

LINE = 'eval "$(/home/linuxbrew/.linuxbrew/bin/brew shellenv)"'


def test_creates_missing_profile(home):
    profile = home / ".bashrc"
    assert append_line(profile, LINE) is True
    assert profile.read_text() == LINE + "\n"


def test_appends_without_touching_existing_content(home):
    profile = home / ".bashrc"
    profile.write_text("alias ll='ls -l'")
    append_line(profile, LINE)
    assert profile.read_text() == "alias ll='ls -l'\n" + LINE + "\n"


def test_second_append_is_skipped(home):
    profile = home / ".bashrc"
    append_line(profile, LINE)
    assert append_line(profile, LINE) is False
    assert profile.read_text().count(LINE) == 1


def test_dry_run_leaves_file_alone(home):
    profile = home / ".zshrc"
    assert append_line(profile, LINE, dry_run=True) is True
    assert not profile.exists()
    assert not has_line(profile, LINE)


def test_unreadable_profile(home):
    (home / ".bashrc").mkdir()
    with pytest.raises(ConfigWriteError, match="Cannot read"):
        append_line(home / ".bashrc", LINE)


def test_profile_in_missing_parent_blocked_by_file(home):
    (home / "dotfiles").write_text("")
    with pytest.raises(ConfigWriteError, match="Failed to append"):
        append_line(home / "dotfiles" / ".bashrc", LINE)
