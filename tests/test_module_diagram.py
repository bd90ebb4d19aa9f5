import unittest

from archzoom.diagrams.module import ModuleDiagramBuilder, module_diagram_body
from archzoom.plantuml import wrap
from tests.factories import project


class TestModuleDiagram(unittest.TestCase):
    def setUp(self) -> None:
        self.unit_a = project(
            "a",
            name="orders",
            module_deps={"m1": ["m2"], "m2": []},
            modules={"m1": "Module One", "m2": "Module Two"},
        )
        self.unit_b = project("b", name="billing", module_deps=None)

    def test_two_units_one_without_dependency_data(self) -> None:
        with self.assertLogs("archzoom.diagrams.module", level="INFO") as logs:
            result = ModuleDiagramBuilder().build([self.unit_a, self.unit_b])

        self.assertIn(
            "INFO:archzoom.diagrams.module:"
            "No module dependency info found for: billing",
            logs.output,
        )
        self.assertEqual(set(result), {"a_plantUML_modules.txt", "all_modules.txt"})
        body = (
            'package "Module One" {}\n'
            'package "Module Two" {}\n'
            "\n"
            '"Module One" --> "Module Two"\n'
        )
        self.assertEqual(result["a_plantUML_modules.txt"], wrap(body))
        self.assertEqual(
            result["all_modules.txt"],
            wrap('package "service: orders" { \n' + body + "}\n\n"),
        )
        self.assertNotIn("billing", result["all_modules.txt"])

    def test_empty_dependency_data_is_still_rendered(self) -> None:
        unit = project("c", module_deps={})
        result = ModuleDiagramBuilder().build([unit])
        self.assertEqual(result["c_plantUML_modules.txt"], wrap("\n"))
        self.assertIn('package "service: c-service"', result["all_modules.txt"])

    def test_display_name_falls_back_to_tag(self) -> None:
        unit = project("a", module_deps={"M1": ["m9"]}, modules={"m1": "Core"})
        self.assertEqual(
            module_diagram_body(unit), 'package "Core" {}\n\n"Core" --> "m9"\n'
        )

    def test_no_units(self) -> None:
        self.assertEqual(
            ModuleDiagramBuilder().build([]), {"all_modules.txt": wrap("")}
        )

    def test_output_is_deterministic(self) -> None:
        builder = ModuleDiagramBuilder()
        self.assertEqual(
            builder.build([self.unit_a, self.unit_b]),
            builder.build([self.unit_a, self.unit_b]),
        )
