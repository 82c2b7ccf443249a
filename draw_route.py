import argparse
import asyncio
import logging
import sys
from dataclasses import replace

from gradient_route import (
    FoliumMapSurface, JsonRouteSource, ProgressiveRenderer,
    fetch_route, load_settings, parse_color, route_length_km
)

logger = logging.getLogger(__name__)

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Draw a route as a progressive gradient polyline on an HTML map.")
    parser.add_argument("route", help="JSON file with a 'coordinates' list of [lat, lng] pairs")
    parser.add_argument("--start-color", help="Gradient start color, e.g. '#ff0000'")
    parser.add_argument("--end-color", help="Gradient end color, e.g. '#0000ff'")
    parser.add_argument("--delay-ms", type=float, help="Pause between segments in milliseconds")
    parser.add_argument("--tolerance", type=float, help="Simplification tolerance in metres")
    parser.add_argument("--width", type=float, help="Line width in pixels")
    parser.add_argument("--output", default="route_map.html", help="Output HTML file")
    parser.add_argument("--fit-bounds", action="store_true", help="Fit the map view to the drawn route")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)

async def run(args) -> int:
    settings = load_settings()
    overrides = {}
    if args.start_color:
        overrides['start_color'] = parse_color(args.start_color)
    if args.end_color:
        overrides['end_color'] = parse_color(args.end_color)
    for name in ('delay_ms', 'tolerance', 'width'):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    settings = replace(settings, **overrides)

    result = await fetch_route(JsonRouteSource(args.route))
    points = result.get_or_none()
    if points is None:
        print(f"❌ Could not load route: {result.error}")
        return 1

    surface = FoliumMapSurface()
    renderer = ProgressiveRenderer()
    finished = []
    build_result = await renderer.render(
        settings.to_request(points), surface,
        on_complete=lambda: finished.append(True)
    )

    if args.fit_bounds and build_result.bounds is not None:
        surface.fit_bounds(build_result.bounds)
    path = surface.save(args.output)

    simplified = [s.start for s in build_result.segments]
    if build_result.segments:
        simplified.append(build_result.segments[-1].end)
    print(f"✅ Drew {len(build_result.segments)} segments from {len(points)} route points")
    print(f"Route length: {route_length_km(simplified):.2f} km")
    print(f"Map saved to {path}")
    return 0 if finished else 1

def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    try:
        return asyncio.run(run(args))
    except ValueError as e:
        logger.error(f"Invalid configuration: {str(e)}")
        return 2

if __name__ == "__main__":
    sys.exit(main())
