"""Filesystem discovery of handler units.

Walks a routes directory and loads every handler file as a module.
The file's location becomes its default route template::

    routes/
      users/
        :id.py           # ANY    /users/:id
        login.post.py    # POST   /users/login
      orders/
        index.py         # ANY    /orders  (and /orders/index)

A handler module exposes:

    handler:  callable, required; returned by dispatch
    path:     str, optional template override
    priority: number, optional ordering override

These are plain module globals, so a module must not bind ``path`` or
``priority`` to anything else.  Imported modules under those names
(``from os import path``) are ignored.

The module docstring is attached to the route as its comment.

Routing only depends on the :class:`Discovery` protocol; anything that
returns :class:`HandlerDefinition` objects can feed a router.
"""

import importlib.machinery
import importlib.util
import logging
import math
import re
import sys
import zlib
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Protocol

from fileroute._internal.types import Handler
from fileroute.config import RouterConfig
from fileroute.errors import ConfigurationError, RouteLoadError
from fileroute.routing.methods import HTTP_METHODS, path_from_file

logger = logging.getLogger("fileroute.discovery")

# Namespace for loaded handler modules in sys.modules
_MODULE_NAMESPACE = "_fileroute_routes"

_UNSAFE_NAME_RE = re.compile(r"\W")


@dataclass(frozen=True, slots=True)
class HandlerDefinition:
    """A discovered handler unit, before its route is compiled.

    Attributes:
        default_path: Template derived from the unit's location.
        handler: The handling logic.
        path: Explicit template declared by the unit, if any.
        priority: Explicit priority declared by the unit, if any.
        comment: Documentation attached to the unit.
        source: File the unit was loaded from.
    """

    default_path: str
    handler: Handler
    path: str | None = None
    priority: float | None = None
    comment: str | None = None
    source: Path | None = None

    @property
    def template(self) -> str:
        """The raw template: the declared path, else the derived one."""
        return self.path if self.path is not None else self.default_path


class Discovery(Protocol):
    """Locates and loads the handler units below a root directory."""

    def discover(self, root: Path) -> Sequence[HandlerDefinition]: ...


class FileSystemDiscovery:
    """Discovers handler modules on disk.

    Files in a directory are visited before its subdirectories, both in
    name order, so discovery order is stable across platforms.
    """

    __slots__ = ("config",)

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config = config or RouterConfig()

    def discover(self, root: Path) -> list[HandlerDefinition]:
        root = Path(root).resolve()
        if not root.exists():
            raise FileNotFoundError(f"Routes directory not found: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"Routes path is not a directory: {root}")

        candidates = find_handler_files(root, self.config)
        if self.config.filter is not None:
            candidates = [file for file in candidates if self.config.filter(file)]

        definitions = [self._load(file, root) for file in candidates]
        logger.debug("Discovered %d handler units in %s", len(definitions), root)
        return definitions

    def _load(self, file: Path, root: Path) -> HandlerDefinition:
        module = load_module(file, root)
        definition = definition_from_module(
            module,
            default_path=path_from_file(file, root, self.config.suffix),
            source=file,
            handler_name=self.config.handler_name,
        )
        logger.debug("Loaded %s -> %s", file, definition.template)
        return definition


def find_handler_files(root: Path, config: RouterConfig) -> list[Path]:
    """Recursively collect handler files, files before subdirectories."""
    files: list[Path] = []
    dirs: list[Path] = []
    for item in sorted(root.iterdir()):
        if _skipped(item.name, config):
            continue
        if item.is_dir():
            dirs.append(item)
        elif item.is_file() and item.name.endswith(config.suffix):
            files.append(item)

    for directory in dirs:
        files.extend(find_handler_files(directory, config))
    return files


def _skipped(name: str, config: RouterConfig) -> bool:
    if name.startswith(".") or name in ("__pycache__", "__init__.py"):
        return True
    return config.skip_private and name.startswith("_")


def module_name_for(file: Path, root: Path) -> str:
    """Return the ``sys.modules`` name for a handler file.

    The readable part is lossy (``:id`` and ``%id`` both become ``_id``),
    so a checksum of the relative path keeps names unique.
    """
    relative = file.relative_to(root).as_posix()
    readable = _UNSAFE_NAME_RE.sub("_", relative.rsplit(".", 1)[0])
    checksum = zlib.crc32(relative.encode("utf-8"))
    return f"{_MODULE_NAMESPACE}.{readable}_{checksum:08x}"


def _ensure_namespace() -> None:
    if _MODULE_NAMESPACE not in sys.modules:
        package = ModuleType(_MODULE_NAMESPACE, "Handler modules loaded by fileroute.")
        package.__path__ = []
        sys.modules[_MODULE_NAMESPACE] = package


def load_module(file: Path, root: Path) -> ModuleType:
    """Execute a handler file as a module without touching ``sys.path``.

    The module is registered in ``sys.modules`` under a unique name inside
    a private namespace package, so classes defined in handler files can be
    pickled and resolved by dataclasses.  Any file suffix is accepted; the
    source is always compiled as Python.

    Raises:
        RouteLoadError: If the file cannot be loaded or raises on import.
    """
    module_name = module_name_for(file, root)
    _ensure_namespace()

    loader = importlib.machinery.SourceFileLoader(module_name, str(file))
    spec = importlib.util.spec_from_file_location(module_name, file, loader=loader)
    if spec is None or spec.loader is None:
        raise RouteLoadError(file, f"Cannot load route module {file}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        raise RouteLoadError(file, f"Failed to load route module {file}: {exc}") from exc
    return module


def definition_from_module(
    module: ModuleType,
    *,
    default_path: str,
    source: Path | None = None,
    handler_name: str = "handler",
) -> HandlerDefinition:
    """Read the handler, ``path``, ``priority`` and docstring from *module*.

    Functions named after HTTP methods (``get``, ``post``, ...) are not
    used for dispatch; a unit's method comes from its filename only.

    Raises:
        ConfigurationError: If the handler is missing or metadata has the
            wrong type.
    """
    where = source or module.__name__
    method_funcs = sorted(
        name
        for name in HTTP_METHODS
        if name != handler_name and callable(getattr(module, name, None))
    )

    handler = getattr(module, handler_name, None)
    if handler is None or not callable(handler):
        msg = f"Route module {where} must define a callable {handler_name!r}."
        if method_funcs:
            msg += (
                f" Found {', '.join(method_funcs)}; methods are bound by filename"
                f" (e.g. 'name.post.py'), not by function name."
            )
        raise ConfigurationError(msg)

    if method_funcs:
        logger.warning(
            "Route module %s defines %s; ignored, the method comes from the filename",
            where,
            ", ".join(method_funcs),
        )

    path = _metadata(module, "path")
    if path is not None:
        if not isinstance(path, str):
            msg = f"Route module {where}: 'path' must be a str, got {type(path).__name__}"
            raise ConfigurationError(msg)
        if not path.startswith("/"):
            path = "/" + path

    priority = _metadata(module, "priority")
    if priority is not None:
        if isinstance(priority, bool) or not isinstance(priority, int | float):
            msg = (
                f"Route module {where}: 'priority' must be a number, "
                f"got {type(priority).__name__}"
            )
            raise ConfigurationError(msg)
        if not math.isfinite(priority):
            msg = f"Route module {where}: 'priority' must be finite, got {priority!r}"
            raise ConfigurationError(msg)

    return HandlerDefinition(
        default_path=default_path,
        handler=handler,
        path=path,
        priority=priority,
        comment=module.__doc__,
        source=source,
    )


def _metadata(module: ModuleType, name: str) -> object:
    value = getattr(module, name, None)
    if isinstance(value, ModuleType):
        logger.debug(
            "Route module %s: ignoring imported module bound to %r", module.__name__, name
        )
        return None
    return value
