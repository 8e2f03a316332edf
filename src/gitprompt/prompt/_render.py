"""Full prompt rendering.

The prompt is ``[elapsed] user@host:cwd/<status>`` followed by a newline
(or a space) and the prompt character. Rendering never fails: anything that
goes wrong while computing the status segment is logged and the segment is
left empty.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gitprompt.config import Config
from gitprompt.git import Git, GitBackend
from gitprompt.prompt._elapsed import elapsed_segment
from gitprompt.prompt._environment import PromptEnvironment
from gitprompt.status import Palette, RepoState, StatusResult, render_status
from gitprompt.utils import (
    collect_ignore_patterns,
    create_null_logger,
    strip_ansi,
    visible_length,
)

if TYPE_CHECKING:
    import pendulum
    from structlog.typing import FilteringBoundLogger


@dataclass(frozen=True, slots=True)
class PromptRender:
    """Rendered prompt text.

    Attributes:
        text: The text to print.
        state: Repository state, or None if the status render failed.
    """

    text: str
    state: RepoState | None


def make_palette(config: Config, *, color: bool = True) -> Palette:
    """Palette for the configured colors, or a colorless one."""
    if not color:
        return Palette.plain()
    return Palette.from_colors(config.colors)


def render_head(env: PromptEnvironment, palette: Palette) -> str:
    """Render ``user@host:cwd/`` with the user and directory colors."""
    user_role = "root" if env.is_root else "user"
    cwd = str(env.cwd).rstrip("/")
    return "".join(
        (
            palette.paint(user_role, f"{env.user}@{env.host_label}"),
            ":",
            palette.paint("cwd", f"{cwd}/"),
        )
    )


def _status_or_none(
    env: PromptEnvironment,
    config: Config,
    *,
    git: GitBackend | None,
    palette: Palette,
    prefix_length: int,
    logger: "FilteringBoundLogger",  # noqa: UP037
) -> StatusResult | None:
    try:
        backend = git if git is not None else Git(env.cwd, logger=logger)
        patterns = collect_ignore_patterns(
            ignore_file=config.ignore_file,
            extra_patterns=config.ignore.dirs,
        )
        return render_status(
            backend,
            cwd=env.cwd,
            config=config,
            palette=palette,
            terminal_width=env.terminal_width,
            prefix_length=prefix_length,
            ignore_patterns=patterns,
            logger=logger,
        )
    except Exception:  # noqa: BLE001 - the prompt must always render
        logger.exception("status_render_failed", cwd=str(env.cwd))
        return None


def render_status_segment(
    env: PromptEnvironment,
    config: Config,
    *,
    git: GitBackend | None = None,
    color: bool = True,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> PromptRender:
    """Render only the git status segment, as if it started a line."""
    log = logger or create_null_logger()
    palette = make_palette(config, color=color)
    result = _status_or_none(
        env, config, git=git, palette=palette, prefix_length=0, logger=log
    )
    if result is None:
        return PromptRender(text="", state=None)
    text = result.text if color else strip_ansi(result.text)
    return PromptRender(text=text, state=result.state)


def render_prompt(
    env: PromptEnvironment,
    config: Config,
    *,
    git: GitBackend | None = None,
    color: bool = True,
    now: "pendulum.DateTime | None" = None,  # noqa: UP037
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> PromptRender:
    """Render the full prompt.

    Args:
        env: Explicit environment inputs.
        config: Effective configuration.
        git: Backend override (defaults to Git bound to env.cwd).
        color: Whether to emit ANSI colors.
        now: Current time for the elapsed segment.
        logger: Logger for the render trace.

    Returns:
        The prompt text and the repository state.
    """
    log = logger or create_null_logger()
    palette = make_palette(config, color=color)

    elapsed = ""
    if config.prompt.show_elapsed:
        elapsed = elapsed_segment(config.timestamp_file, now=now, logger=log)

    prompt_char = (
        config.prompt.root_prompt_char if env.is_root else config.prompt.prompt_char
    )
    tail = f"{prompt_char} "
    if config.prompt.two_line:
        separator, reserved = "\n", 0
    else:
        # The prompt character shares the line, so the summary leaves room for it
        separator, reserved = " ", 1 + visible_length(tail)

    head = elapsed + render_head(env, palette)
    result = _status_or_none(
        env,
        config,
        git=git,
        palette=palette,
        prefix_length=visible_length(head) + reserved,
        logger=log,
    )
    status = result.text if result is not None else ""

    text = f"{head}{palette.paint('status', status)}{separator}{tail}"
    if not color:
        text = strip_ansi(text)
    return PromptRender(text=text, state=result.state if result is not None else None)
