"""Unit tests for ProviderRegistry."""

import pytest

from service_manager.application.service_manager import ServiceManager
from service_manager.domain import (
    IBootstrapper,
    IServiceProvider,
    NoProviderForServiceError,
    ProviderAlreadyRegisteredError,
    ProviderMissingContractError,
    ProviderNotRegisteredError,
    ProviderRegistrationError,
    ProviderTypeUndefinedError,
)


class Report:
    def __init__(self, title: str = "untitled"):
        self.title = title


class ReportProvider(IServiceProvider):
    def __init__(self, prefix: str = ""):
        self.prefix = prefix
        self.handled = []

    def supports(self, type_id):
        return type_id.endswith(".Report")

    def handle(self, type_id, params=None):
        self.handled.append(type_id)
        return Report(**(params or {}))

    def is_singleton_expected(self, type_id):
        return False


class CatchAllProvider(IServiceProvider):
    def supports(self, type_id):
        return True

    def handle(self, type_id, params=None):
        return "catch-all"

    def is_singleton_expected(self, type_id):
        return True


class BootstrappedProvider(IServiceProvider, IBootstrapper):
    def __init__(self):
        self.bootstrap_calls = []

    def bootstrap(self, manager):
        self.bootstrap_calls.append(manager)

    def supports(self, type_id):
        return False

    def handle(self, type_id, params=None):
        raise AssertionError("never called")

    def is_singleton_expected(self, type_id):
        return True


class NotAProvider:
    pass


class TestProviderRegistration:
    """Test cases for registering providers."""

    def test_register_provider(self):
        """Test that a provider is instantiated and stored."""
        manager = ServiceManager()
        manager.providers.register_provider(ReportProvider)

        assert manager.providers.has_provider(ReportProvider)
        assert isinstance(manager.providers.get_provider(ReportProvider), ReportProvider)
        assert len(manager.providers) == 1

    def test_register_provider_with_params(self):
        """Test that constructor parameters reach the provider."""
        manager = ServiceManager()
        manager.providers.register_provider(ReportProvider, {"prefix": "monthly"})

        assert manager.providers.get_provider(ReportProvider).prefix == "monthly"

    def test_register_provider_by_identifier(self):
        """Test registering a provider by its dotted identifier."""
        manager = ServiceManager()
        provider_id = manager.types.identify(ReportProvider)

        manager.providers.register_provider(provider_id)
        assert manager.providers.has_provider(ReportProvider)

    def test_register_undefined_provider_raises(self):
        """Test that the provider type must exist."""
        manager = ServiceManager()

        with pytest.raises(ProviderTypeUndefinedError):
            manager.providers.register_provider("missing_pkg.providers.ReportProvider")

    def test_register_provider_twice_raises(self):
        """Test that a provider type can only be registered once."""
        manager = ServiceManager()
        manager.providers.register_provider(ReportProvider)
        first = manager.providers.get_provider(ReportProvider)

        with pytest.raises(ProviderAlreadyRegisteredError):
            manager.providers.register_provider(ReportProvider)

        assert manager.providers.get_provider(ReportProvider) is first

    def test_register_class_without_contract_raises(self):
        """Test that providers must implement IServiceProvider."""
        manager = ServiceManager()

        with pytest.raises(ProviderMissingContractError):
            manager.providers.register_provider(NotAProvider)

        assert not manager.providers.has_provider(NotAProvider)

    def test_register_provider_constructor_failure_is_wrapped(self):
        """Test that injector failures surface as ProviderRegistrationError."""

        class FailingProvider(ReportProvider):
            def __init__(self):
                raise RuntimeError("no connection")

        manager = ServiceManager()

        with pytest.raises(ProviderRegistrationError) as exc_info:
            manager.providers.register_provider(FailingProvider)

        assert exc_info.value.cause is exc_info.value.__cause__
        assert "no connection" in str(exc_info.value)
        assert not manager.providers.has_provider(FailingProvider)

    def test_register_provider_with_unknown_params_is_wrapped(self):
        """Test that invalid constructor parameters surface as ProviderRegistrationError."""
        manager = ServiceManager()

        with pytest.raises(ProviderRegistrationError):
            manager.providers.register_provider(ReportProvider, {"unknown": 1})

    def test_bootstrapped_provider_is_bootstrapped_once(self):
        """Test that a bootstrapping provider receives the manager once."""
        manager = ServiceManager()
        manager.providers.register_provider(BootstrappedProvider)

        provider = manager.providers.get_provider(BootstrappedProvider)
        assert provider.bootstrap_calls == [manager]

        manager.providers.get_provider(BootstrappedProvider)
        manager.has("app.Anything")
        assert len(provider.bootstrap_calls) == 1

    def test_provider_receives_services_from_manager(self):
        """Test that provider constructors are injected like services."""

        class Settings:
            pass

        class SettingsAwareProvider(ReportProvider):
            def __init__(self, settings: Settings):
                super().__init__()
                self.settings = settings

        manager = ServiceManager()
        manager.register(Settings)
        manager.providers.register_provider(SettingsAwareProvider)

        provider = manager.providers.get_provider(SettingsAwareProvider)
        assert provider.settings is manager.get(Settings)


class TestProviderLookup:
    """Test cases for finding providers."""

    def test_get_unregistered_provider_raises(self):
        """Test that get_provider fails for unknown providers."""
        manager = ServiceManager()

        with pytest.raises(ProviderNotRegisteredError):
            manager.providers.get_provider(ReportProvider)

    def test_get_provider_for_returns_supporting_provider(self):
        """Test that the supporting provider is found."""
        manager = ServiceManager()
        manager.providers.register_provider(ReportProvider)

        provider = manager.providers.get_provider_for(Report)
        assert provider is manager.providers.get_provider(ReportProvider)
        assert manager.providers.supports(Report)

    def test_get_provider_for_returns_none_without_match(self):
        """Test that no provider is returned for unclaimed types."""
        manager = ServiceManager()
        manager.providers.register_provider(ReportProvider)

        assert manager.providers.get_provider_for("app.Invoice") is None
        assert not manager.providers.supports("app.Invoice")

    def test_first_registered_provider_wins(self):
        """Test that registration order decides between overlapping providers."""
        manager = ServiceManager()
        manager.providers.register_provider(CatchAllProvider)
        manager.providers.register_provider(ReportProvider)

        assert manager.providers.get_provider_for(Report) is manager.providers.get_provider(CatchAllProvider)
        assert manager.providers.get(Report) == "catch-all"
        assert manager.providers.get_provider(ReportProvider).handled == []

    def test_get_builds_through_provider(self):
        """Test that get delegates to the provider's handle."""
        manager = ServiceManager()
        manager.providers.register_provider(ReportProvider)

        report = manager.providers.get(Report, {"title": "Q3"})

        assert isinstance(report, Report)
        assert report.title == "Q3"

    def test_get_without_provider_raises(self):
        """Test that get fails when no provider supports the type."""
        manager = ServiceManager()

        with pytest.raises(NoProviderForServiceError):
            manager.providers.get(Report)
