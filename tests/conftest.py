import os
from pathlib import Path
from typing import Callable

import pytest
from hypothesis import settings

settings.register_profile("ci", max_examples=300, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture  # type: ignore[misc]
def tiny_file(tmp_path: Path) -> Callable[..., Path]:
    def write(source: str, name: str = "prog.tiny") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return write
