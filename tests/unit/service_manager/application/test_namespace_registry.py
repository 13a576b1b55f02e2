"""Unit tests for NamespaceRegistry."""

import pytest

from service_manager.application.namespace_registry import NamespaceRegistry
from service_manager.domain import NamespaceAlreadyRegisteredError, NamespaceInvalidError


class TestNamespaceRegistration:
    """Test cases for registering namespaces."""

    def test_register_appends_separator(self):
        """Test that namespaces are stored with a trailing separator."""
        namespaces = NamespaceRegistry()
        namespaces.register("app.services")
        assert list(namespaces) == ["app.services."]

    def test_register_keeps_existing_separator(self):
        """Test that a trailing separator is not doubled."""
        namespaces = NamespaceRegistry()
        namespaces.register("app.services.")
        assert list(namespaces) == ["app.services."]

    def test_register_keeps_order(self):
        """Test that namespaces keep registration order."""
        namespaces = NamespaceRegistry()
        namespaces.register("zeta")
        namespaces.register("alpha")
        assert list(namespaces) == ["zeta.", "alpha."]
        assert len(namespaces) == 2

    def test_register_duplicate_raises(self):
        """Test that registering the same namespace twice fails."""
        namespaces = NamespaceRegistry()
        namespaces.register("app.services")

        with pytest.raises(NamespaceAlreadyRegisteredError) as exc_info:
            namespaces.register("app.services")

        assert exc_info.value.namespace == "app.services."

    def test_register_duplicate_after_normalization_raises(self):
        """Test that a namespace with and without separator are the same."""
        namespaces = NamespaceRegistry()
        namespaces.register("app.services")

        with pytest.raises(NamespaceAlreadyRegisteredError):
            namespaces.register("app.services.")

        assert len(namespaces) == 1

    @pytest.mark.parametrize(
        "namespace",
        ["", "1app", "_app", ".app", "app-services", "app services", "app/services", "app.services\nother"],
    )
    def test_register_invalid_namespace_raises(self, namespace):
        """Test that namespaces outside the identifier grammar are rejected."""
        namespaces = NamespaceRegistry()

        with pytest.raises(NamespaceInvalidError):
            namespaces.register(namespace)

        assert len(namespaces) == 0

    def test_register_non_string_raises(self):
        """Test that non-string namespaces are rejected."""
        with pytest.raises(NamespaceInvalidError):
            NamespaceRegistry().register(None)

    @pytest.mark.parametrize("namespace", ["app", "App2", "app_v2.services", "a.b.c"])
    def test_register_valid_namespaces(self, namespace):
        """Test that dotted identifier paths are accepted."""
        namespaces = NamespaceRegistry()
        namespaces.register(namespace)
        assert namespace in namespaces


class TestNamespaceMatching:
    """Test cases for matching identifiers against namespaces."""

    def test_matches_identifier_under_namespace(self):
        """Test that identifiers under a namespace match."""
        namespaces = NamespaceRegistry()
        namespaces.register("app.services")

        assert namespaces.matches("app.services.Logger")
        assert namespaces.matches("app.services.mail.Mailer")

    def test_does_not_match_sibling_prefix(self):
        """Test that the separator prevents partial segment matches."""
        namespaces = NamespaceRegistry()
        namespaces.register("app.services")

        assert not namespaces.matches("app.services_extra.Logger")
        assert not namespaces.matches("app.servicesLogger")

    def test_does_not_match_other_namespace(self):
        """Test that identifiers outside every namespace do not match."""
        namespaces = NamespaceRegistry()
        namespaces.register("app.services")

        assert not namespaces.matches("other.Logger")
        assert not namespaces.matches("app.Logger")

    def test_empty_registry_matches_nothing(self):
        """Test that nothing matches without namespaces."""
        assert not NamespaceRegistry().matches("app.services.Logger")

    def test_any_namespace_matches(self):
        """Test that a match in any namespace is enough."""
        namespaces = NamespaceRegistry()
        namespaces.register("app.services")
        namespaces.register("lib")

        assert namespaces.matches("lib.Clock")

    def test_contains_normalizes(self):
        """Test membership with and without the separator."""
        namespaces = NamespaceRegistry()
        namespaces.register("app")

        assert "app" in namespaces
        assert "app." in namespaces
        assert "other" not in namespaces
        assert 42 not in namespaces
