"""Unit tests for provider selection."""

import pytest

from campus.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from campus.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    def test_concrete_provider_is_used_directly(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert (
            get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        )


class TestBuildTestContainer:
    def test_unknown_component_is_rejected(self):
        with pytest.raises(DependencyInjectionError, match="Unknown components"):
            build_test_container(unmock={"search"})  # type: ignore[arg-type]
