import json
import os
import tempfile
import unittest
from unittest.mock import patch
import draw_route

class TestDrawRoute(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.route_path = os.path.join(self.tmp.name, 'route.json')
        self.output = os.path.join(self.tmp.name, 'map.html')
        with open(self.route_path, 'w') as f:
            json.dump({'coordinates': [[30.0444, 31.2357], [30.3, 30.9], [30.6, 30.5], [31.2001, 29.9187]]}, f)
        patcher = patch('gradient_route.settings.load_dotenv')
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_draws_map(self):
        code = draw_route.main([self.route_path, '--output', self.output, '--delay-ms', '0',
                                '--start-color', '#ff0000', '--end-color', '#0000ff', '--fit-bounds'])
        self.assertEqual(code, 0)
        with open(self.output) as f:
            self.assertIn('#ff0000', f.read())

    def test_missing_route(self):
        code = draw_route.main([os.path.join(self.tmp.name, 'nope.json'), '--output', self.output])
        self.assertEqual(code, 1)
        self.assertFalse(os.path.exists(self.output))

    def test_invalid_color(self):
        code = draw_route.main([self.route_path, '--output', self.output, '--start-color', 'teal'])
        self.assertEqual(code, 2)

if __name__ == '__main__':
    unittest.main()
