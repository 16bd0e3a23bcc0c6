"""Path shortening for file names shown in log messages.

Absolute paths below one of three well-known roots are rewritten with a
symbolic marker so messages stay readable::

    /var/www/site/app/Controllers/Home.py  ->  APPPATH/Controllers/Home.py

Roots are checked in a fixed order (application, framework, public) and the
first matching prefix wins.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class PathRoots:
    """Well-known directory roots used by :func:`clean_path`.

    Unset roots (``None`` or empty) never match.
    """

    app_root: str | None = None
    framework_root: str | None = None
    public_root: str | None = None

    def markers(self) -> tuple[tuple[str, str], ...]:
        """Return ``(root, marker)`` pairs in matching order, skipping unset roots."""

        pairs = (
            (self.app_root, "APPPATH/"),
            (self.framework_root, "BASEPATH/"),
            (self.public_root, "FCPATH/"),
        )
        return tuple((_with_separator(root), marker) for root, marker in pairs if root)


def clean_path(file: str, roots: PathRoots) -> str:
    """Replace the first matching root prefix of ``file`` with its marker.

    Examples
    --------
    >>> roots = PathRoots(app_root="/srv/site/app", framework_root="/srv/site", public_root="/srv/site/public")
    >>> clean_path("/srv/site/app/Controllers/Home.py", roots)
    'APPPATH/Controllers/Home.py'
    >>> clean_path("/srv/site/system/Log/Logger.py", roots)
    'BASEPATH/system/Log/Logger.py'
    >>> clean_path("/tmp/other.py", roots)
    '/tmp/other.py'
    """

    for root, marker in roots.markers():
        if file.startswith(root):
            return marker + file[len(root):]
    return file


def _with_separator(root: str) -> str:
    return root if root.endswith(("/", "\\")) else root + "/"


__all__ = ["PathRoots", "clean_path"]
