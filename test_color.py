import unittest
from gradient_route import Color, interpolate, parse_color

class TestInterpolate(unittest.TestCase):
    def test_same_color_is_unchanged(self):
        """A gradient between identical colors is that color"""
        color = Color.rgb(12, 200, 99)
        for n in range(1, 12):
            for i in range(n):
                self.assertEqual(interpolate(color, color, n, i), color)

    def test_first_segment_is_start_color(self):
        start = Color.rgb(255, 0, 0)
        end = Color.rgb(0, 0, 255)
        self.assertEqual(interpolate(start, end, 2, 0), start)

    def test_steps_divide_by_segment_count(self):
        """The last index stops one step short of the end color"""
        start = Color.rgb(0, 0, 0)
        end = Color.rgb(255, 255, 255)
        reds = [interpolate(start, end, 4, i).red for i in range(4)]
        self.assertEqual(reds, [0, 64, 128, 191])
        self.assertNotEqual(interpolate(start, end, 4, 3), end)

    def test_monotonic_and_in_range(self):
        start = Color.rgb(10, 240, 128)
        end = Color.rgb(250, 5, 128)
        for n in (1, 2, 3, 7, 50, 256):
            colors = [interpolate(start, end, n, i) for i in range(n)]
            for prev, cur in zip(colors, colors[1:]):
                self.assertGreaterEqual(cur.red, prev.red)
                self.assertLessEqual(cur.green, prev.green)
                self.assertEqual(cur.blue, 128)
            for c in colors:
                for channel in (c.red, c.green, c.blue):
                    self.assertTrue(0 <= channel <= 255)

    def test_result_is_opaque(self):
        start = Color(0x00102030)
        end = Color(0x80405060)
        self.assertEqual(interpolate(start, end, 3, 1).alpha, 255)

    def test_zero_segment_count_rejected(self):
        with self.assertRaises(ValueError):
            interpolate(Color.rgb(0, 0, 0), Color.rgb(1, 1, 1), 0, 0)

class TestColor(unittest.TestCase):
    def test_rgb_clamps_channels(self):
        color = Color.rgb(300, -20, 128)
        self.assertEqual((color.alpha, color.red, color.green, color.blue), (255, 255, 0, 128))

    def test_hex(self):
        self.assertEqual(Color.rgb(255, 87, 34).hex, '#ff5722')

class TestParseColor(unittest.TestCase):
    def test_hex_formats(self):
        expected = Color.rgb(0x3F, 0x51, 0xB5)
        for text in ('#3f51b5', '#3F51B5', '0x3f51b5', '3f51b5', '  #3f51b5 '):
            self.assertEqual(parse_color(text), expected)
        self.assertEqual(Color.from_hex('#3f51b5'), expected)

    def test_tuple_and_color(self):
        color = Color.rgb(1, 2, 3)
        self.assertEqual(parse_color((1, 2, 3)), color)
        self.assertIs(parse_color(color), color)

    def test_invalid_values(self):
        for value in ('#fff', '#gggggg', (1, 2), (0, 0, 256), 42):
            with self.assertRaises(ValueError):
                parse_color(value)

if __name__ == '__main__':
    unittest.main()
