"""Shared fixtures: on-disk route trees."""

from collections.abc import Callable
from pathlib import Path

import pytest

HANDLER_SOURCE = '''"""{doc}"""

def handler(request):
    return {name!r}
'''


@pytest.fixture
def write_routes(tmp_path: Path) -> Callable[..., Path]:
    """Write handler modules under ``tmp_path / "routes"``.

    Each argument is a relative file path; a value of ``None`` writes a
    default handler returning the path, a string writes that source.
    """

    def _write(files: dict[str, str | None]) -> Path:
        root = tmp_path / "routes"
        root.mkdir(exist_ok=True)
        for relative, source in files.items():
            file = root / relative
            file.parent.mkdir(parents=True, exist_ok=True)
            if source is None:
                source = HANDLER_SOURCE.format(doc=f"Handler for {relative}.", name=relative)
            file.write_text(source, encoding="utf-8")
        return root

    return _write
