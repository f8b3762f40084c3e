import itertools
from collections.abc import Callable

from pytest import fixture

from lazystruct.settings import ENV_PREFIX, get_settings


@fixture(autouse=True)
def clean_settings(monkeypatch):
    monkeypatch.delenv(f"{ENV_PREFIX}STRICT_FLOAT_PARSING", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@fixture
def counter() -> Callable[[], int]:
    return itertools.count(1).__next__


@fixture
def strict_float_parsing(monkeypatch):
    monkeypatch.setenv(f"{ENV_PREFIX}STRICT_FLOAT_PARSING", "true")
    get_settings.cache_clear()
