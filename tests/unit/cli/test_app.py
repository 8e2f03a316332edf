from collections.abc import Callable
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from gitprompt.cli import CLIContext
from gitprompt.cli._commands import ExitCode
from gitprompt.config import Config
from gitprompt.prompt import PromptEnvironment, PromptRender
from gitprompt.status import Normal, Unsafe

type RunCli = Callable[..., int]

PROMPT_TARGET = "gitprompt.cli._commands._prompt.render_prompt"
STATUS_TARGET = "gitprompt.cli._commands._prompt.render_status_segment"
LOGGER_TARGET = "gitprompt.cli._app.create_prompt_logger"


class TestPromptCommand:
    def test_prints_prompt_without_newline(
        self,
        git_prompt_cli: RunCli,
        mocker: MockerFixture,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = mocker.patch(PROMPT_TARGET, return_value=PromptRender("P$ ", None))

        assert git_prompt_cli() == 0
        assert capsys.readouterr().out == "P$ "

    def test_global_options(
        self,
        git_prompt_cli: RunCli,
        mocker: MockerFixture,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        render = mocker.patch(PROMPT_TARGET, return_value=PromptRender("", None))

        assert git_prompt_cli("--no-color", "--width", "132", "--elapsed") == 0

        env, config = render.call_args.args
        assert isinstance(env, PromptEnvironment)
        assert env.terminal_width == 132
        assert isinstance(config, Config)
        assert config.prompt.show_elapsed is True
        assert render.call_args.kwargs["color"] is False

    def test_invalid_width(
        self,
        git_prompt_cli: RunCli,
        mocker: MockerFixture,
    ) -> None:
        render = mocker.patch(PROMPT_TARGET)

        assert git_prompt_cli("--width", "0") != 0
        render.assert_not_called()

    def test_missing_config_file(
        self,
        git_prompt_cli: RunCli,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        missing = tmp_path / "missing.toml"

        assert git_prompt_cli("--config", str(missing)) == ExitCode.NOT_FOUND
        assert "Config file not found" in capsys.readouterr().err

    def test_config_file_applied(
        self,
        git_prompt_cli: RunCli,
        mocker: MockerFixture,
        tmp_path: Path,
    ) -> None:
        path = tmp_path / "config.toml"
        _ = path.write_text('[prompt]\nprompt_char = ">"\n')
        render = mocker.patch(PROMPT_TARGET, return_value=PromptRender("", None))

        _ = git_prompt_cli("--config", str(path))

        assert render.call_args.args[1].prompt.prompt_char == ">"

    def test_unsafe_repository_warns(
        self,
        git_prompt_cli: RunCli,
        mocker: MockerFixture,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        advisory = "git config --global --add safe.directory /srv/[repo]"
        _ = mocker.patch(
            PROMPT_TARGET,
            return_value=PromptRender("P$ ", Unsafe(advisory=advisory)),
        )

        assert git_prompt_cli() == 0

        captured = capsys.readouterr()
        assert captured.out == "P$ "
        assert "Warning:" in captured.err
        assert "safe.directory /srv/[repo]" in captured.err

    @pytest.mark.parametrize(
        ("args", "command"),
        [((), "prompt"), (("--no-color",), "prompt"), (("status",), "status")],
    )
    def test_logger_bound_to_command(
        self,
        git_prompt_cli: RunCli,
        mocker: MockerFixture,
        args: tuple[str, ...],
        command: str,
    ) -> None:
        create_logger = mocker.patch(LOGGER_TARGET, return_value=mocker.Mock())
        _ = mocker.patch(PROMPT_TARGET, return_value=PromptRender("", None))
        _ = mocker.patch(STATUS_TARGET, return_value=PromptRender("", None))

        _ = git_prompt_cli(*args)

        assert create_logger.call_args.kwargs["command"] == command

    def test_context_reset_after_run(
        self, git_prompt_cli: RunCli, mocker: MockerFixture
    ) -> None:
        _ = mocker.patch(PROMPT_TARGET, return_value=PromptRender("", None))

        _ = git_prompt_cli("--no-color")

        assert CLIContext.get_current().no_color is False


class TestStatusCommand:
    def test_prints_segment_with_newline(
        self,
        git_prompt_cli: RunCli,
        mocker: MockerFixture,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = mocker.patch(
            STATUS_TARGET, return_value=PromptRender("(main)", Normal(branch="main"))
        )

        assert git_prompt_cli("status") == 0
        assert capsys.readouterr().out == "(main)\n"

    def test_empty_segment_prints_nothing(
        self,
        git_prompt_cli: RunCli,
        mocker: MockerFixture,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = mocker.patch(STATUS_TARGET, return_value=PromptRender("", None))

        assert git_prompt_cli("status") == 0
        assert capsys.readouterr().out == ""

    def test_no_color(
        self,
        git_prompt_cli: RunCli,
        mocker: MockerFixture,
    ) -> None:
        render = mocker.patch(STATUS_TARGET, return_value=PromptRender("", None))

        _ = git_prompt_cli("--no-color", "status")

        assert render.call_args.kwargs["color"] is False


class TestInitCommand:
    def test_default_shell_is_bash(
        self, git_prompt_cli: RunCli, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert git_prompt_cli("init") == 0
        assert "PS1='$(git-prompt)'" in capsys.readouterr().out

    def test_zsh(
        self, git_prompt_cli: RunCli, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert git_prompt_cli("init", "zsh") == 0
        assert "setopt PROMPT_SUBST" in capsys.readouterr().out

    def test_unknown_shell(self, git_prompt_cli: RunCli) -> None:
        assert git_prompt_cli("init", "fish") != 0
