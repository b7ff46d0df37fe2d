from types import SimpleNamespace

from django.test import SimpleTestCase

from duocore.apps.entries.services.uniforms import (
    LegacyCombinedString,
    StructuredKits,
    aggregate_uniforms,
    sorted_totals,
    uniform_source,
)


class UniformSourceTest(SimpleTestCase):
    def test_flat_structured(self):
        src = uniform_source({"athlete1_kit": "m", "athlete2_kit": "g", "uniforms": "m / g"})
        self.assertEqual(src, StructuredKits("m", "g"))

    def test_nested_json_shape(self):
        rec = {"athlete1": {"kit": "p"}, "athlete2": {"kit": None}}
        self.assertEqual(uniform_source(rec), StructuredKits("p", ""))

    def test_legacy_only(self):
        self.assertEqual(uniform_source({"uniforms": "M / G"}), LegacyCombinedString("M / G"))

    def test_model_like_object(self):
        obj = SimpleNamespace(athlete1_kit="", athlete2_kit="", uniforms="GG / P")
        self.assertEqual(uniform_source(obj), LegacyCombinedString("GG / P"))

    def test_nothing(self):
        self.assertIsNone(uniform_source({"athlete1_kit": "", "uniforms": ""}))


class AggregateUniformsTest(SimpleTestCase):
    def test_legacy_string_split(self):
        self.assertEqual(aggregate_uniforms([{"uniforms": "M / G"}]), {"Kit M": 1, "Kit G": 1})

    def test_equivalent_labels_counted_together(self):
        entries = [
            {"athlete1_kit": "m masculino", "athlete2_kit": "M   Masculino"},
            {"athlete1": {"kit": "KIT M MASCULINO"}, "athlete2": {"kit": "g feminino"}},
        ]
        self.assertEqual(
            aggregate_uniforms(entries),
            {"Kit M Masculino": 3, "Kit G Feminino": 1},
        )

    def test_three_shapes_together(self):
        entries = [
            {"athlete1_kit": "p", "athlete2_kit": "", "uniforms": "p / "},
            {"athlete1": {"kit": "p"}, "athlete2": {"kit": "gg"}},
            {"uniforms": "gg / "},
        ]
        self.assertEqual(aggregate_uniforms(entries), {"Kit P": 2, "Kit GG": 2})

    def test_structured_row_with_legacy_copy_not_double_counted(self):
        entries = [{"athlete1_kit": "M", "athlete2_kit": "G", "uniforms": "M / G"}]
        self.assertEqual(aggregate_uniforms(entries), {"Kit M": 1, "Kit G": 1})

    def test_empty(self):
        self.assertEqual(aggregate_uniforms([]), {})
        self.assertEqual(aggregate_uniforms([{"uniforms": " / "}]), {})

    def test_sorted_totals(self):
        totals = {"Kit P": 1, "Kit G": 4, "Kit M Masculino": 2}
        self.assertEqual(
            sorted_totals(totals),
            [("Kit G", 4), ("Kit M Masculino", 2), ("Kit P", 1)],
        )
