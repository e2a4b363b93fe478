import os
from unittest.mock import patch

import pytest

from pathstyle.core import PathOperations, get_style


@pytest.fixture
def clean_env():
    """Environment without any PATHSTYLE_* variables."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("PATHSTYLE_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def unix():
    """Operations for Unix paths."""
    return PathOperations(get_style("unix"))


@pytest.fixture
def win():
    """Operations for Windows paths with the backslash separator."""
    return PathOperations(get_style("windows"))


@pytest.fixture
def win_slash():
    """Operations for Windows paths that build paths with forward slashes."""
    return PathOperations(get_style("windows", sep="/"))


@pytest.fixture
def path_file(tmp_path):
    """Text file with one path per line."""
    path = tmp_path / "paths.txt"
    path.write_text("a/./b/../c\n/a/../../b\n../../x\n\n")
    return path
