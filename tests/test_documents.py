import json
import unittest

from profile_chart_studio.core.builtins import (
    BuiltinRegistry,
    load_builtin_samples,
    load_builtin_templates,
)
from profile_chart_studio.core.documents import (
    build_print_document,
    initial_document_state,
    refresh_preview,
    render_preview,
)
from profile_chart_studio.core.state import DocumentState, select_sample, select_template


class TestTemplatePreview(unittest.TestCase):
    def test_interpolation(self):
        result = render_preview("Hello {{ name }}", '{"name":"World"}')
        self.assertEqual(result.html, "Hello World")
        self.assertIsNone(result.error)

    def test_malformed_json_clears_output(self):
        result = render_preview("Hello {{ name }}", "{")
        self.assertEqual(result.html, "")
        self.assertTrue(result.error)

    def test_template_syntax_error(self):
        result = render_preview("{% for x in items %}", "{}")
        self.assertEqual(result.html, "")
        self.assertTrue(result.error)

    def test_loops_and_conditionals(self):
        tpl = "{% for i in items %}{% if i.on %}[{{ i.n }}]{% endif %}{% endfor %}"
        data = json.dumps({"items": [{"n": 1, "on": True}, {"n": 2, "on": False}, {"n": 3, "on": True}]})
        self.assertEqual(render_preview(tpl, data).html, "[1][3]")

    def test_blank_data_is_empty_object(self):
        self.assertEqual(render_preview("x{{ missing }}y", "").html, "xy")

    def test_non_object_json_exposed_as_data(self):
        self.assertEqual(render_preview("{{ data | size }}", "[1, 2, 3]").html, "3")

    def test_filter_with_argument(self):
        self.assertEqual(render_preview("{{ price | times: 2 }}", '{"price": 21}').html, "42")
        self.assertEqual(render_preview("{{ name | upcase }}", '{"name": "World"}').html, "WORLD")

    def test_for_loop_limit(self):
        tpl = "{% for i in items limit:2 %}{{ i }};{% endfor %}"
        self.assertEqual(render_preview(tpl, '{"items": [1, 2, 3]}').html, "1;2;")

    def test_unknown_filter_is_reported(self):
        result = render_preview("{{ name | no_such_filter }}", '{"name": "x"}')
        self.assertEqual(result.html, "")
        self.assertTrue(result.error)

    def test_refresh_records_and_clears_error(self):
        state = DocumentState(template_text="{{ a }}", data_text="{")
        refresh_preview(state)
        self.assertTrue(state.error)
        state.data_text = '{"a": 1}'
        self.assertEqual(refresh_preview(state).html, "1")
        self.assertIsNone(state.error)


class TestPrintDocument(unittest.TestCase):
    def test_print_styles_and_body(self):
        doc = build_print_document("Invoice <1>", "<table><tr><td>x</td></tr></table>")
        self.assertTrue(doc.startswith("<!DOCTYPE html>"))
        self.assertIn("size: A4 portrait", doc)
        self.assertIn("margin: 12mm", doc)
        self.assertIn("zoom: 0.9", doc)
        self.assertIn(".pagebreak{ page-break-before: always; }", doc)
        self.assertIn("<title>Invoice &lt;1&gt;</title>", doc)
        self.assertIn('<div class="print-wrapper"><table>', doc)


class TestBuiltins(unittest.TestCase):
    def test_registries_sorted_and_populated(self):
        templates = load_builtin_templates()
        samples = load_builtin_samples()
        self.assertEqual(templates.names(), sorted(templates.names()))
        self.assertIn("invoice", templates)
        self.assertIn("invoice", samples)
        self.assertEqual(templates.default_name(), templates.names()[0])

    def test_bundled_pairs_render(self):
        templates = load_builtin_templates()
        samples = load_builtin_samples()
        for name in templates.names():
            with self.subTest(template=name):
                self.assertIn(name, samples)
                json.loads(samples.get(name))
                result = render_preview(templates.get(name), samples.get(name))
                self.assertIsNone(result.error)
                self.assertTrue(result.html.strip())

    def test_registry_is_read_only(self):
        reg = BuiltinRegistry({"b": "2", "a": "1"})
        self.assertEqual(reg.names(), ["a", "b"])
        with self.assertRaises(TypeError):
            reg.entries["c"] = "3"

    def test_selection_copies_text(self):
        reg = BuiltinRegistry({"greeting": "Hello {{ name }}"})
        state = DocumentState()
        select_template(state, "greeting", reg.entries)
        state.template_text += "!"
        self.assertEqual(reg.get("greeting"), "Hello {{ name }}")
        select_template(state, "greeting", reg.entries)
        self.assertEqual(state.template_text, "Hello {{ name }}")

    def test_initial_state_uses_first_entries(self):
        templates = BuiltinRegistry({"b": "B", "a": "A"})
        samples = BuiltinRegistry({"z": '{"x": 1}'})
        state = initial_document_state(templates, samples)
        self.assertEqual((state.template_name, state.template_text), ("a", "A"))
        self.assertEqual((state.data_name, state.data_text), ("z", '{"x": 1}'))

    def test_initial_state_without_samples(self):
        state = initial_document_state(BuiltinRegistry({"a": "A"}), BuiltinRegistry({}))
        self.assertEqual(state.data_text, "{}")
        select_sample(state, "x", {"x": "[]"})
        self.assertEqual(state.data_text, "[]")


if __name__ == "__main__":
    unittest.main()
