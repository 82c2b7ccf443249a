import json
import os
import tempfile
import unittest
from gradient_route import GeoPoint, JsonRouteSource, RouteDataError, StaticRouteSource, fetch_route
from gradient_route.route_source import parse_route

class TestParseRoute(unittest.TestCase):
    def test_parse_coordinates(self):
        text = '{"coordinates": [[30.0444, 31.2357], [31.2001, 29.9187]]}'
        self.assertEqual(parse_route(text), [GeoPoint(30.0444, 31.2357), GeoPoint(31.2001, 29.9187)])

    def test_empty_coordinates(self):
        self.assertEqual(parse_route('{"coordinates": []}'), [])

    def test_invalid_json(self):
        with self.assertRaises(RouteDataError):
            parse_route('invalid json content')

    def test_missing_coordinates(self):
        for text in ('{"points": []}', '[[1, 2]]'):
            with self.assertRaises(RouteDataError):
                parse_route(text)

    def test_bad_pair(self):
        with self.assertRaises(RouteDataError):
            parse_route('{"coordinates": [[1.0, 2.0], [3.0]]}')
        with self.assertRaises(RouteDataError):
            parse_route('{"coordinates": [["north", 2.0]]}')

class TestRouteSources(unittest.IsolatedAsyncioTestCase):
    async def test_json_route_source(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'route.json')
            with open(path, 'w') as f:
                json.dump({'coordinates': [[1, 2], [3, 4], [5, 6]]}, f)
            points = await JsonRouteSource(path).get_route()
        self.assertEqual(points, [GeoPoint(1.0, 2.0), GeoPoint(3.0, 4.0), GeoPoint(5.0, 6.0)])

    async def test_static_route_source_returns_copy(self):
        points = [GeoPoint(1.0, 2.0)]
        source = StaticRouteSource(points)
        route = await source.get_route()
        route.append(GeoPoint(3.0, 4.0))
        self.assertEqual(await source.get_route(), points)

    async def test_fetch_route_success(self):
        result = await fetch_route(StaticRouteSource([GeoPoint(1.0, 2.0)]))
        self.assertTrue(result.is_success)
        self.assertEqual(result.get_or_none(), [GeoPoint(1.0, 2.0)])

    async def test_fetch_route_failure(self):
        with tempfile.TemporaryDirectory() as tmp:
            result = await fetch_route(JsonRouteSource(os.path.join(tmp, 'missing.json')))
        self.assertFalse(result.is_success)
        self.assertIsInstance(result.error, FileNotFoundError)
        self.assertIsNone(result.get_or_none())

if __name__ == '__main__':
    unittest.main()
