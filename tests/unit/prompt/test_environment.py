import os
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from gitprompt.prompt import PromptEnvironment, detect_multiplexer


class TestDetectMultiplexer:
    @pytest.mark.parametrize(
        ("environ", "expected"),
        [
            ({"TMUX": "/tmp/tmux-1000/default,4242,0"}, "tmux"),
            ({"STY": "4242.pts-0.box"}, "screen"),
            ({"TMUX": "/tmp/tmux", "STY": "4242.pts-0.box"}, "tmux"),
            ({"TMUX": ""}, None),
            ({}, None),
        ],
    )
    def test_detect(self, environ: dict[str, str], expected: str | None) -> None:
        assert detect_multiplexer(environ) == expected


class TestPromptEnvironment:
    def test_root(self) -> None:
        env = PromptEnvironment(
            user="root", host="box", cwd=Path("/"), terminal_width=80, euid=0
        )
        assert env.is_root is True

    def test_unknown_euid_is_not_root(self) -> None:
        env = PromptEnvironment(user="x", host="box", cwd=Path("/"), terminal_width=80)
        assert env.is_root is False

    def test_host_label(self) -> None:
        env = PromptEnvironment(
            user="alice",
            host="box",
            cwd=Path("/"),
            terminal_width=80,
            multiplexer="screen",
        )
        assert env.host_label == "box[screen]"


class TestFromOs:
    @pytest.fixture(autouse=True)
    def _hostname(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(
            "gitprompt.prompt._environment.socket.gethostname", return_value="box"
        )

    def test_explicit_overrides(self) -> None:
        env = PromptEnvironment.from_os(
            cwd=Path("/srv/app"),
            terminal_width=120,
            environ={"USER": "alice", "TMUX": "/tmp/tmux"},
        )

        assert env.user == "alice"
        assert env.host == "box"
        assert env.cwd == Path("/srv/app")
        assert env.terminal_width == 120
        assert env.multiplexer == "tmux"
        if hasattr(os, "geteuid"):
            assert env.euid == os.geteuid()

    def test_user_falls_back_to_getpass(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(
            "gitprompt.prompt._environment.getpass.getuser", return_value="bob"
        )

        env = PromptEnvironment.from_os(cwd=Path("/"), terminal_width=80, environ={})

        assert env.user == "bob"

    def test_terminal_width_detected(self, mocker: MockerFixture) -> None:
        _ = mocker.patch(
            "gitprompt.prompt._environment.get_terminal_width", return_value=132
        )

        env = PromptEnvironment.from_os(cwd=Path("/"), environ={"USER": "alice"})

        assert env.terminal_width == 132

    def test_cwd_keeps_symlinked_pwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real)
        monkeypatch.chdir(link)

        env = PromptEnvironment.from_os(
            terminal_width=80, environ={"USER": "alice", "PWD": str(link)}
        )

        assert env.cwd == link

    def test_stale_pwd_uses_physical_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        env = PromptEnvironment.from_os(
            terminal_width=80,
            environ={"USER": "alice", "PWD": str(tmp_path / "gone")},
        )

        assert env.cwd == Path.cwd()
