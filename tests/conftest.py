import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


@pytest.fixture
def go_source():
    """Build Go source bytes from interface body lines."""

    def _build(*lines: str, package: str = "mypackage") -> bytes:
        return "\n".join([f"package {package}", "", *lines, ""]).encode("utf-8")

    return _build
