"""Architecture tests for the Inventory bounded context."""

from pytest_archon import archrule


class TestInventoryBoundedContextIsolation:
    def test_inventory_does_not_import_iam(self):
        """Inventory resolves user names through the schema, not IAM code."""
        (
            archrule("inventory_no_iam")
            .match("inventory*")
            .should_not_import("iam*")
            .check("inventory")
        )


class TestInventoryLayerBoundaries:
    def test_domain_does_not_import_infrastructure(self):
        (
            archrule("inventory_domain_no_infrastructure")
            .match("inventory.domain*")
            .should_not_import(
                "inventory.infrastructure*", "infrastructure*", "sqlalchemy*"
            )
            .check("inventory")
        )

    def test_ports_do_not_import_infrastructure(self):
        (
            archrule("inventory_ports_no_infrastructure")
            .match("inventory.ports*")
            .should_not_import("inventory.infrastructure*")
            .check("inventory")
        )

    def test_application_does_not_import_repositories(self):
        (
            archrule("inventory_application_no_infrastructure")
            .match("inventory.application*")
            .should_not_import("inventory.infrastructure*")
            .check("inventory")
        )
