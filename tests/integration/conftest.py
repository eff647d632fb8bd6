import stat
import sys
from pathlib import Path

import pytest

FAKE_JAVA = """#!/bin/sh
# Stand-in for "java -jar yuicompressor.jar ... -o OUT IN".
out=""
last=""
while [ $# -gt 0 ]; do
  case "$1" in
    -o) out="$2"; shift 2 ;;
    *) last="$1"; shift ;;
  esac
done
cp "$last" "$out"
printf '[WARNING] %s: unused var x\\n\\n[WARNING] %s: missing semi\\n' "$last" "$last" >&2
exit 0
"""

SLOW_JAVA = """#!/bin/sh
sleep 2
printf '[WARNING] finished late\\n' >&2
"""


def _write_script(path: Path, body: str) -> Path:
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture()
def fake_java(tmp_path: Path) -> Path:
    if sys.platform == "win32":
        pytest.skip("stand-in compressor is a POSIX shell script")
    return _write_script(tmp_path / "java", FAKE_JAVA)


@pytest.fixture()
def slow_java(tmp_path: Path) -> Path:
    if sys.platform == "win32":
        pytest.skip("stand-in compressor is a POSIX shell script")
    return _write_script(tmp_path / "slow-java", SLOW_JAVA)


@pytest.fixture()
def assets_dir(tmp_path: Path) -> Path:
    path = tmp_path / "assets"
    path.mkdir()
    return path
