from __future__ import annotations

import pytest

from lib_log_chain.domain.paths import PathRoots, clean_path

ROOTS = PathRoots(app_root="/var/www/site/app", framework_root="/var/www/site/vendor/framework", public_root="/var/www/site/public")


@pytest.mark.parametrize(
    "file, expected",
    [
        ("/var/www/site/app/Controllers/Home.py", "APPPATH/Controllers/Home.py"),
        ("/var/www/site/vendor/framework/Log/Logger.py", "BASEPATH/Log/Logger.py"),
        ("/var/www/site/public/index.py", "FCPATH/index.py"),
        ("/opt/other/module.py", "/opt/other/module.py"),
        ("/var/www/site/application.py", "/var/www/site/application.py"),
    ],
)
def test_clean_path_rewrites_known_roots(file: str, expected: str) -> None:
    assert clean_path(file, ROOTS) == expected


def test_first_matching_root_wins_for_nested_roots() -> None:
    roots = PathRoots(app_root="/srv/app", framework_root="/srv", public_root="/srv/app/public")

    assert clean_path("/srv/app/public/index.py", roots) == "APPPATH/public/index.py"
    assert clean_path("/srv/lib/x.py", roots) == "BASEPATH/lib/x.py"


def test_trailing_separator_on_root_is_accepted() -> None:
    roots = PathRoots(app_root="/srv/app/")

    assert clean_path("/srv/app/models.py", roots) == "APPPATH/models.py"


def test_unset_roots_never_match() -> None:
    roots = PathRoots(app_root=None, framework_root="", public_root=None)

    assert roots.markers() == ()
    assert clean_path("/anything/at/all.py", roots) == "/anything/at/all.py"
