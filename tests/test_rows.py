import math
import unittest

from profile_chart_studio.core.rows import (
    add_row,
    apply_table_ops,
    coerce_number,
    delete_row,
    diff_table_edit,
    edit_row,
    table_records,
)
from profile_chart_studio.core.state import DEMO_SAMPLES, Sample


class TestRowEditor(unittest.TestCase):
    def test_add_after_last_distance(self):
        out = add_row([Sample(5, 1.5, -2)])
        self.assertEqual(len(out), 2)
        self.assertEqual(out[-1], Sample(6, 0, 0))

    def test_add_to_empty_starts_at_zero(self):
        self.assertEqual(add_row([]), [Sample(0, 0, 0)])

    def test_delete_keeps_order(self):
        samples = list(DEMO_SAMPLES)
        out = delete_row(samples, 1)
        self.assertEqual(len(out), len(samples) - 1)
        self.assertEqual(out, [samples[0], samples[2], samples[3], samples[4]])

    def test_delete_out_of_range_is_noop(self):
        samples = list(DEMO_SAMPLES)
        self.assertEqual(delete_row(samples, 17), samples)

    def test_edit_replaces_one_field(self):
        out = edit_row(list(DEMO_SAMPLES), 3, "upper", "0.75")
        self.assertEqual(out[3], Sample(8.0, 0.75, -1.3))
        self.assertEqual(out[4], DEMO_SAMPLES[4])

    def test_edit_stores_nan_for_text(self):
        out = edit_row(list(DEMO_SAMPLES), 0, "distance", "abc")
        self.assertTrue(math.isnan(out[0].distance))
        self.assertEqual(out[0].lower, -1.2)

    def test_edit_unknown_field(self):
        with self.assertRaises(KeyError):
            edit_row(list(DEMO_SAMPLES), 0, "depth", 1)


class TestCoerceNumber(unittest.TestCase):
    def test_values(self):
        self.assertEqual(coerce_number(""), 0.0)
        self.assertEqual(coerce_number("  "), 0.0)
        self.assertEqual(coerce_number(" 2.5 "), 2.5)
        self.assertEqual(coerce_number(3), 3.0)
        self.assertTrue(math.isnan(coerce_number("abc")))
        self.assertTrue(math.isnan(coerce_number(None)))


class TestTableDiff(unittest.TestCase):
    def test_detects_cell_edit(self):
        records = table_records(DEMO_SAMPLES)
        records[2]["lower"] = "-2"
        self.assertEqual(diff_table_edit(list(DEMO_SAMPLES), records), [("edit", 2, "lower", "-2")])

    def test_pasted_block_yields_every_cell(self):
        records = table_records(DEMO_SAMPLES)
        records[1]["lower"] = "-2"
        records[2]["lower"] = "-3"
        records[2]["upper"] = "0.5"
        ops = diff_table_edit(list(DEMO_SAMPLES), records)
        self.assertEqual(
            ops,
            [("edit", 1, "lower", "-2"), ("edit", 2, "upper", "0.5"), ("edit", 2, "lower", "-3")],
        )
        out = apply_table_ops(DEMO_SAMPLES, ops)
        self.assertEqual([s.lower for s in out], [-1.2, -2.0, -3.0, -1.3, -1.2])
        self.assertEqual(out[2].upper, 0.5)

    def test_detects_deleted_row(self):
        records = table_records(DEMO_SAMPLES)
        del records[3]
        ops = diff_table_edit(list(DEMO_SAMPLES), records)
        self.assertEqual(ops, [("delete", 3, None, None)])
        self.assertEqual(apply_table_ops(DEMO_SAMPLES, ops)[3], DEMO_SAMPLES[4])

    def test_detects_deleted_last_row(self):
        records = table_records(DEMO_SAMPLES)[:-1]
        self.assertEqual(diff_table_edit(list(DEMO_SAMPLES), records), [("delete", 4, None, None)])

    def test_no_change(self):
        self.assertEqual(diff_table_edit(list(DEMO_SAMPLES), table_records(DEMO_SAMPLES)), [])

    def test_nan_shown_as_empty_cell(self):
        records = table_records([Sample(1, math.nan, 2)])
        self.assertEqual(records, [{"order": 1, "distance": 1, "upper": None, "lower": 2}])
        self.assertEqual(diff_table_edit([Sample(1, math.nan, 2)], records), [])


if __name__ == "__main__":
    unittest.main()
