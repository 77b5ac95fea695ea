# redis_resolver/path_resolver.py

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional, Union

PathArg = Union[str, os.PathLike]


class DirectoryResolver:
    """
    Uncached resolver mapping dotted names to files under directories.

    Each directory is registered for a name prefix: with
    ``add("acme", "/srv/src")`` the name ``acme.billing.invoice`` is looked
    up as ``/srv/src/acme/billing/invoice.py`` and then
    ``/srv/src/acme/billing/invoice/__init__.py``.
    """

    def __init__(self) -> None:
        self._prefixes: dict[str, list[Path]] = {}
        self._fallback: list[Path] = []

    def add(self, prefix: str, paths: Union[PathArg, Iterable[PathArg]]) -> None:
        """
        Register one or more base directories for a name prefix.

        :param prefix: Dotted name prefix; "" registers fallback directories
        :param paths: A directory or an iterable of directories
        """
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        dirs = [Path(p) for p in paths]

        if not prefix:
            self._fallback.extend(dirs)
            return
        self._prefixes.setdefault(prefix, []).extend(dirs)

    def get_prefixes(self) -> dict[str, list[Path]]:
        """Return the registered prefixes and their directories."""
        return {prefix: list(dirs) for prefix, dirs in self._prefixes.items()}

    def get_fallback_dirs(self) -> list[Path]:
        """Return the directories registered with the "" prefix."""
        return list(self._fallback)

    def _candidate_dirs(self, name: str) -> Iterable[Path]:
        matching = [
            prefix
            for prefix in self._prefixes
            if name == prefix or name.startswith(prefix + ".")
        ]
        for prefix in sorted(matching, key=len, reverse=True):
            yield from self._prefixes[prefix]
        yield from self._fallback

    def resolve(self, name: str) -> Optional[str]:
        """
        Find the file defining a dotted name.

        :param name: Dotted module name
        :return: Path of the module file, or None if it cannot be found
        """
        relative = Path(*name.split("."))
        for base in self._candidate_dirs(name):
            module_file = base / relative.with_name(relative.name + ".py")
            if module_file.is_file():
                return str(module_file)

            package_init = base / relative / "__init__.py"
            if package_init.is_file():
                return str(package_init)

        return None
