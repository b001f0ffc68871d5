import pytest

from makepot.config import MakePotConfig


@pytest.fixture
def config(tmp_path):
    return MakePotConfig(slug="my-plugin", source_dir=str(tmp_path))
