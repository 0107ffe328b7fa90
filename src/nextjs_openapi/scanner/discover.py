"""Route discovery — walks an API directory for Next.js route handlers."""

import logging
import os
from pathlib import Path

from nextjs_openapi.errors import DiscoveryFailure
from nextjs_openapi.scanner.base import RouteUnit

logger = logging.getLogger(__name__)

ROUTE_FILENAMES = frozenset({"route.js", "route.ts", "route.jsx", "route.tsx"})


def is_route_file(filename: str) -> bool:
    """Return True for the exact, case-sensitive route handler names."""
    return filename in ROUTE_FILENAMES


def discover_routes(root: str | Path) -> list[RouteUnit]:
    """Walk ``root`` recursively and return every route handler file.

    Unreadable files are skipped and the walk carries on. Order follows
    ``os.walk`` and is not stable across platforms.

    Raises DiscoveryFailure when ``root`` is missing or not a directory.
    """
    root = Path(root)
    if not root.is_dir():
        raise DiscoveryFailure(f"API directory not found: {root}")

    routes: list[RouteUnit] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        for name in filenames:
            if not is_route_file(name):
                continue
            route = _read_route(Path(dirpath) / name)
            if route is not None:
                routes.append(route)
    return routes


def _read_route(path: Path) -> RouteUnit | None:
    if not path.is_file():
        logger.debug("Skipping non-regular file %s", path)
        return None
    try:
        content = path.read_bytes().decode("utf-8", errors="replace")
    except OSError as e:
        logger.debug("Skipping unreadable file %s: %s", path, e)
        return None
    return RouteUnit(
        file_path=str(path),
        file_type=path.suffix.lstrip("."),
        content=content,
    )


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable directory %s: %s", error.filename, error)
