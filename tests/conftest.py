import pytest

from mdtotex.parsing.converter import Converter


@pytest.fixture
def converter() -> Converter:
    return Converter()
