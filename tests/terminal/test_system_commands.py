"""Unit tests for echo, ps, whoami, date, help, man, history and clear."""

from datetime import datetime, timedelta, timezone

from terminal.commands.docs import HELP_TEXT, MAN_PAGES
from terminal.commands.system import (
    PROCESS_TABLE,
    clear,
    date,
    echo,
    help_,
    history,
    man,
    ps,
    whoami,
)
from tests.fixtures.terminal import create_context, create_environment


class TestEcho:
    """Test echo."""

    def test_joins_arguments(self):
        assert echo(create_context("echo", ["hello", "world"])).output == "hello world"

    def test_quoted_argument_kept_whole(self):
        assert echo(create_context("echo", ["a  b"])).output == "a  b"

    def test_no_arguments(self):
        assert echo(create_context("echo")).output == ""


class TestInformational:
    """Test ps, whoami and date."""

    def test_ps(self):
        output = ps(create_context("ps")).output

        assert output == "\n".join(PROCESS_TABLE)
        assert output.startswith("  PID TTY")

    def test_whoami(self):
        ctx = create_context("whoami", environment=create_environment(username="ada"))

        assert whoami(ctx).output == "ada"

    def test_date_in_utc(self):
        assert date(create_context("date")).output == "Fri Mar 07 14:05:09 UTC 2025"

    def test_date_with_offset_zone(self):
        zone = timezone(timedelta(hours=-8), "PST")
        env = create_environment(now=datetime(2024, 12, 25, 9, 30, 0, tzinfo=zone))

        assert date(create_context("date", environment=env)).output == (
            "Wed Dec 25 09:30:00 PST 2024"
        )


class TestHelpAndMan:
    """Test help and man."""

    def test_help(self):
        output = help_(create_context("help")).output

        assert output == HELP_TEXT
        assert output.startswith("Available commands:")
        assert "gh pr list" in output

    def test_help_lists_extra_commands(self):
        commands = {"deploy": "Ship the build", "ls": "List directory contents"}

        output = help_(create_context("help", commands=commands)).output

        assert output.startswith(HELP_TEXT)
        assert output.endswith("\n\nOther Commands:\n  deploy                 Ship the build")

    def test_help_topic(self):
        commands = {"ls": "List directory contents", "bare": ""}

        assert help_(create_context("help", ["LS"], commands=commands)).output == (
            "ls: List directory contents"
        )
        assert help_(create_context("help", ["bare"], commands=commands)).output == (
            "bare: No description available"
        )

    def test_help_unknown_topic(self):
        output = help_(create_context("help", ["vim"], commands={"ls": "List"})).output

        assert output == "help: no help topics match 'vim'"

    def test_man_page(self):
        output = man(create_context("man", ["ls"])).output

        assert output == MAN_PAGES["ls"]
        assert output.startswith("LS(1)")
        assert "NAME\n       ls - list directory contents" in output

    def test_man_unknown(self):
        assert man(create_context("man", ["vim"])).output == "No manual entry for vim"

    def test_man_without_argument(self):
        assert man(create_context("man")).output == "What manual page do you want?"

    def test_every_file_command_has_a_page(self):
        for name in ("ls", "cd", "cat", "mkdir", "touch", "rm", "cp", "mv", "find", "grep"):
            assert name in MAN_PAGES


class TestHistoryAndClear:
    """Test history and clear."""

    def test_history_is_numbered(self):
        ctx = create_context("history", history=["ls", "cd docs", "history"])

        assert history(ctx).output == "    1  ls\n    2  cd docs\n    3  history"

    def test_clear_sets_flag(self):
        result = clear(create_context("clear"))

        assert result.clear_screen is True
        assert result.output == ""
