import unittest

from archzoom.diagrams.service import ServiceDiagramBuilder, group_services
from archzoom.diagrams.system import SystemDiagramBuilder, group_subsystems
from archzoom.plantuml import wrap
from tests.factories import call, project


def landscape():
    return [
        project("orders", name="Orders", system="shop", subsystem="sales"),
        project("billing", name="Billing", system="shop", subsystem="finance"),
        project("cart", name="Cart", system="shop", subsystem="sales"),
        project("ledger", name="Ledger", system="accounting", subsystem="finance"),
    ]


class TestSystemDiagram(unittest.TestCase):
    def test_missing_system_and_subsystem_use_fallback_label(self) -> None:
        units = [
            project("a", system=None, subsystem="sales"),
            project("b", system="shop", subsystem=None),
        ]
        self.assertEqual(
            group_subsystems(units),
            {"unassigned": ["sales"], "shop": ["unassigned"]},
        )
        self.assertNotIn('"None"', SystemDiagramBuilder().build(units)["systems.txt"])

    def test_grouping_is_distinct_and_ordered(self) -> None:
        self.assertEqual(
            group_subsystems(landscape()),
            {"shop": ["sales", "finance"], "accounting": ["finance"]},
        )

    def test_diagram(self) -> None:
        result = SystemDiagramBuilder().build(landscape())
        self.assertEqual(
            result,
            {
                "systems.txt": wrap(
                    'package "shop" {\n'
                    'package "sales" {}\n'
                    'package "finance" {}\n'
                    "}\n\n"
                    'package "accounting" {\n'
                    'package "finance" {}\n'
                    "}\n\n"
                )
            },
        )


class TestServiceDiagram(unittest.TestCase):
    def test_grouping(self) -> None:
        self.assertEqual(
            group_services(landscape()),
            {
                "shop": {"sales": ["Orders", "Cart"], "finance": ["Billing"]},
                "accounting": {"finance": ["Ledger"]},
            },
        )

    def test_diagram_without_dependencies(self) -> None:
        result = ServiceDiagramBuilder().build(landscape(), None)
        self.assertEqual(
            result["services.txt"],
            wrap(
                'package "shop" {\n'
                'package "sales" {\n'
                'package "Orders" {}\n'
                'package "Cart" {}\n'
                "}\n"
                'package "finance" {\n'
                'package "Billing" {}\n'
                "}\n"
                "}\n\n"
                'package "accounting" {\n'
                'package "finance" {\n'
                'package "Ledger" {}\n'
                "}\n"
                "}\n\n"
            ),
        )

    def test_call_edges(self) -> None:
        deps = [
            call("a", "b", service="Orders", depends_on="Billing",
                 method="POST", path="/invoices"),
            call("a", "c", service="Cart", depends_on="Orders",
                 method="GET", path="/orders/{id}"),
        ]
        text = ServiceDiagramBuilder().build(landscape(), deps)["services.txt"]
        self.assertTrue(
            text.endswith(
                '"Orders"-->"Billing" : "POST : /invoices"\n'
                '"Cart"-->"Orders" : "GET : /orders/{id}"\n'
                "@enduml\n"
            )
        )
        self.assertNotIn('package "external"', text)

    def test_single_external_package_for_default_service(self) -> None:
        deps = [
            call("a", "x", service="Orders", depends_on="payments-default"),
            call("a", "y", service="Cart", depends_on="PAYMENTS-DEFAULT"),
            call("a", "z", service="Billing", depends_on="EXTERNAL"),
        ]
        builder = ServiceDiagramBuilder(default_service="payments-default")
        text = builder.build(landscape(), deps)["services.txt"]
        self.assertEqual(text.count('package "external" {}\n'), 1)
        self.assertLess(text.index('package "external"'), text.index('"Orders"-->'))

    def test_empty_dependency_list(self) -> None:
        with self.assertLogs("archzoom.diagrams.service", level="INFO") as logs:
            text = ServiceDiagramBuilder().build(landscape(), [])["services.txt"]
        self.assertIn("No dependencies between services found", logs.output[-1])
        without = ServiceDiagramBuilder().build(landscape(), None)["services.txt"]
        self.assertEqual(text, without)

    def test_missing_project_name_uses_tag(self) -> None:
        unit = project("svc", name="", system="s", subsystem="sub")
        self.assertEqual(group_services([unit]), {"s": {"sub": ["svc"]}})

    def test_missing_system_and_subsystem_use_fallback_label(self) -> None:
        unit = project("svc", name="Svc", system=None, subsystem=None)
        self.assertEqual(
            group_services([unit]), {"unassigned": {"unassigned": ["Svc"]}}
        )
        text = ServiceDiagramBuilder().build([unit])["services.txt"]
        self.assertNotIn('"None"', text)
