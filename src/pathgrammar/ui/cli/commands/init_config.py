"""Init-config command implementation."""

from pathlib import Path
from typing import final

from typing_extensions import override

from pathgrammar.config.config import Config
from pathgrammar.config.paths import default_config_path
from pathgrammar.platform.logging import logger
from pathgrammar.ui.cli.args.options import InitConfigArgs
from pathgrammar.ui.cli.commands.base import CommandExecutor


@final
class InitConfigCommand(CommandExecutor[InitConfigArgs, Path | None]):
    """Persist the effective configuration as a commented TOML file."""

    @override
    def execute(self) -> Path | None:
        """Write the configuration file.

        Returns:
            The written path, or ``None`` when an existing file was left alone.
        """
        destination = self.args.target or default_config_path()
        if destination.exists() and not self.args.force:
            logger.error("Configuration already exists at %s (use --force to overwrite)", destination)
            return None
        return Config.load().save(destination)
