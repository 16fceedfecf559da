"""Load plugins from user-supplied Python files."""

import importlib.util
import inspect
import logging
from pathlib import Path
from typing import Union

from .base import Plugin, Preset

logger = logging.getLogger(__name__)


def load_plugins_from_file(file_path: Union[str, Path]) -> list[Plugin]:
    """Load plugins from a Python file.

    Module-level ``Plugin`` instances and ``Preset`` instances are collected,
    as are ``Plugin`` subclasses defined in the file that declare tag names
    (these are instantiated without arguments).

    Args:
        file_path: Path to Python file with plugins

    Returns:
        Plugins in the order they were found

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Plugin file not found: {file_path}")

    try:
        spec = importlib.util.spec_from_file_location(f"tagdown_plugins_{file_path.stem}", file_path)
        if not spec or not spec.loader:
            raise ImportError(f"Could not load {file_path}")

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
    except Exception as e:
        logger.error(f"Failed to load plugins from {file_path}: {e}", exc_info=True)
        raise

    plugins: list[Plugin] = []
    for name, obj in vars(module).items():
        if name.startswith("_"):
            continue
        if isinstance(obj, Plugin):
            plugins.append(obj)
        elif isinstance(obj, Preset):
            plugins.extend(obj.plugins)
        elif (
            inspect.isclass(obj)
            and issubclass(obj, Plugin)
            and obj.__module__ == module.__name__
            and obj.tag_names
        ):
            plugins.append(obj())

    logger.info(f"Loaded {len(plugins)} plugins from {file_path}")
    return plugins
