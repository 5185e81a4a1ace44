import io
import json
import unittest
from contextlib import redirect_stdout
from unittest import mock

from seeded_random import Rand48, _format_numbers, generate_random_numbers, main, to_int32, to_int64


class Rand48Tests(unittest.TestCase):
    def test_first_draw_for_seed_zero(self):
        self.assertEqual(Rand48(0).next_int(), -1155484576)

    def test_narrowed_long_is_second_int_draw(self):
        narrowed = [to_int32(v) for v in Rand48(0).longs(10)]
        ints = Rand48(0).ints(20)
        self.assertEqual(narrowed, ints[1::2])

    def test_values_fit_their_width(self):
        rng = Rand48(123)
        self.assertTrue(all(-(2**31) <= n < 2**31 for n in rng.ints(100)))
        self.assertTrue(all(-(2**63) <= n < 2**63 for n in rng.longs(100)))

    def test_negative_bulk_count_raises(self):
        with self.assertRaises(ValueError):
            Rand48(0).ints(-1)
        with self.assertRaises(ValueError):
            Rand48(0).longs(-1)


class NarrowingTests(unittest.TestCase):
    def test_to_int32_keeps_low_bits(self):
        self.assertEqual(to_int32(2**31), -(2**31))
        self.assertEqual(to_int32(2**32 + 5), 5)
        self.assertEqual(to_int32(-1), -1)

    def test_to_int64_keeps_low_bits(self):
        self.assertEqual(to_int64(2**63), -(2**63))
        self.assertEqual(to_int64(2**64 - 1), -1)


class GenerateRandomNumbersTests(unittest.TestCase):
    def test_reproducible_output(self):
        first = generate_random_numbers(seed=42, count=5)
        second = generate_random_numbers(seed=42, count=5)
        self.assertEqual(first, second)

    def test_different_seeds_differ(self):
        self.assertNotEqual(
            generate_random_numbers(seed=1, count=5),
            generate_random_numbers(seed=2, count=5),
        )

    def test_wide_draws_longs(self):
        self.assertEqual(generate_random_numbers(seed=7, count=3, wide=True), Rand48(7).longs(3))

    def test_negative_count_raises(self):
        with self.assertRaises(ValueError):
            generate_random_numbers(seed=1, count=-1)


class FormatNumbersTests(unittest.TestCase):
    def test_plain_output(self):
        self.assertEqual(_format_numbers([1, -2], as_json=False), "1\n-2")

    def test_json_output(self):
        self.assertEqual(_format_numbers([1, -2], as_json=True), '{"numbers": [1, -2]}')


class CommandLineTests(unittest.TestCase):
    def run_main(self, *argv):
        out = io.StringIO()
        with mock.patch("sys.argv", ["seeded_random.py", *argv]), redirect_stdout(out):
            main()
        return out.getvalue()

    def test_wide_json_output(self):
        payload = json.loads(self.run_main("--seed", "0", "--count", "1", "--wide", "--json"))
        self.assertEqual(payload, {"numbers": [-4962768465676381896]})

    def test_default_prints_32_bit_lines(self):
        output = self.run_main("--seed", "0", "--count", "2")
        self.assertEqual(output.splitlines(), ["-1155484576", "-723955400"])

    def test_seed_is_required(self):
        with mock.patch("sys.argv", ["seeded_random.py"]), redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit):
                main()


if __name__ == "__main__":
    unittest.main()
