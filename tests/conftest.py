"""Shared pytest fixtures for the e-book library test suite."""

import pytest


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path):
    """Return a Settings instance with logs under tmp_path and no .env overrides."""
    from config.settings import Settings
    return Settings(
        _env_file=None,
        log_dir=tmp_path / "logs",
        chapters_per_novel=5,
        photo_count=12,
    )


# ---------------------------------------------------------------------------
# Catalog fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def catalog():
    """Return the seeded sample catalog."""
    from catalog.store import Catalog
    return Catalog.from_seed()


@pytest.fixture
def martial_author(catalog):
    """金庸."""
    return catalog.get_author("jinyong")


@pytest.fixture
def romance_author(catalog):
    """瓊瑤."""
    return catalog.get_author("qiongyao")


@pytest.fixture
def martial_novel(catalog, martial_author):
    """射鵰英雄傳 by 金庸."""
    return catalog.list_novels(martial_author)[0]


# ---------------------------------------------------------------------------
# Navigation fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def history():
    from navigation.callbacks import HistoryListener
    return HistoryListener()


@pytest.fixture
def navigator(catalog, history):
    """Return a Navigator at the martial section root with a history listener attached."""
    from navigation.machine import Navigator
    return Navigator(catalog, listeners=[history])


@pytest.fixture
def session(catalog, settings):
    from navigation.session import ReaderSession
    return ReaderSession(catalog, settings)
