"""Discovery of command definitions in a directory of Python files."""

import importlib.util
import logging
import sys
from pathlib import Path
from typing import Any

from .command import Command

logger = logging.getLogger(__name__)


class CommandLoader:
    """Imports command modules and collects the root commands they define."""

    def __init__(self, package: str = "commands") -> None:
        self.package = package
        self.modules: dict[str, Any] = {}

    def discover(self, directory: str | Path) -> list[Path]:
        path = Path(directory)
        if not path.is_dir():
            logger.warning(f"Command directory does not exist: {path}")
            return []

        discovered = sorted(
            p for p in path.iterdir()
            if p.is_file() and p.suffix == ".py" and not p.name.startswith("_")
        )
        logger.info(f"Discovered command modules: {[p.stem for p in discovered]}")
        return discovered

    def _load_module(self, file_path: Path) -> Any:
        module_name = f"{self.package}.{file_path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, file_path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load command module {file_path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            sys.modules.pop(module_name, None)
            raise
        self.modules[module_name] = module
        return module

    @staticmethod
    def _extract_commands(module: Any) -> list[Command]:
        commands = []
        for value in vars(module).values():
            if isinstance(value, Command) and value.parent is None and value not in commands:
                commands.append(value)
        return commands

    def load_directory(self, directory: str | Path) -> list[Command]:
        """Import every command module of a directory.

        A module that fails to import is logged and skipped.
        """
        commands: list[Command] = []
        for file_path in self.discover(directory):
            try:
                module = self._load_module(file_path)
            except Exception as e:
                logger.error(f"Failed to load command module {file_path.name}: {e}")
                continue

            found = self._extract_commands(module)
            logger.debug(f"Module {file_path.stem} defines {[c.name for c in found]}")
            commands.extend(found)
        return commands
