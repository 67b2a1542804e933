from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relnotes.core.config import CONFIG_FILE_NAME, Config, load_config
from relnotes.core.errors import ErrorCode
from relnotes.core.result import Err
from relnotes.output.console import ConsoleProtocol, RichConsole, Style


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context(config_path: Path | None) -> CLIContext:
    """Load configuration and set up console output.

    An explicitly requested config file must exist; the default
    ``relnotes.toml`` in the current directory is optional.
    """
    console = RichConsole()
    path = config_path or Path.cwd() / CONFIG_FILE_NAME

    if config_path is None and not path.exists():
        return CLIContext(config=Config(), console=console)

    result = load_config(path)
    if isinstance(result, Err):
        console.error(result.error.message)
        if result.error.path is not None:
            console.print(f"hint: {result.error.path}", Style.DIM)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    return CLIContext(config=result.value, console=console)
