"""
Copyright 2026 light-map-shapely authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

"""
Room Demo - Soft Light Among Mixed Obstacles

A 1200x640 room at (40, 40) furnished with every supported obstacle kind:
a triangle, four rectangles, four circles (quality 12) and a star polygon.
The light is sampled from four positions one unit around the light center
and the fans are drawn with low opacity on top of each other, which
softens the shadow edges. A circular sensor reports whether any light
reaches it.

Outputs (in ./output):
- room_demo.svg: the light fans, obstacles and room frame
- light_triangles.csv: the central light fan
"""

import sys
import os

# Add parent directories to path to import light_map_shapely
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from light_map_shapely.core.geometry import Point, Rect, Triangle, Circle
from light_map_shapely.core.light_map import LightMap
from light_map_shapely.core.shapes import create_star
from light_map_shapely.core.svg_renderer import LightMapSVGRenderer
from light_map_shapely.analysis import (
    calculate_soft_light_triangles,
    is_shape_lit,
    lit_area,
    save_light_triangles_csv,
)

SOFT_LIGHT_COLORS = (
    'rgb(56, 61, 54)',
    'rgb(59, 59, 56)',
    'rgb(61, 56, 48)',
    'rgb(64, 54, 51)',
)


def build_light_map(verbose=0):
    """Create the demo room with all of its obstacles."""
    light_map = LightMap(Rect(40, 40, 1200, 640), verbose=verbose)

    triangles = [Triangle(Point(120, 120), Point(300, 120), Point(120, 500))]
    rects = [Rect(600, 40, 40, 260), Rect(440, 300, 440, 40),
             Rect(1040, 300, 200, 40), Rect(480, 480, 240, 100)]
    circles = [Circle(Point(1000, 500), 80), Circle(Point(460, 180), 30),
               Circle(Point(240, 480), 30), Circle(Point(300, 560), 30)]
    polygons = [create_star(60, 0, Point(940, 180))]

    for triangle in triangles:
        light_map.add_object(triangle)
    for rect in rects:
        light_map.add_object(rect)
    for circle in circles:
        light_map.add_object(circle, 12)
    for polygon in polygons:
        light_map.add_object(polygon)

    return light_map


def main():
    print("Room Demo - Soft Light Among Mixed Obstacles")
    print("=" * 60)

    light_map = build_light_map(verbose=1)
    light_pos = Point(360, 420)
    print(f"Registered segments: {len(light_map.segments)}")

    fans = calculate_soft_light_triangles(light_map, light_pos)

    renderer = LightMapSVGRenderer(width=1280, height=720)
    for fan, color in zip(fans, SOFT_LIGHT_COLORS):
        renderer.draw_light_triangles(fan, color=color, opacity=0.9)

    renderer.draw_segments(light_map.segments)
    renderer.draw_room_frame(light_map.get_room())

    central_fan = light_map.calculate_light_triangles(light_pos)
    sensor = Circle(Point(600, 610), 20)
    sensor_on = is_shape_lit(central_fan, sensor)
    renderer.draw_light(sensor.center, color='red' if sensor_on else 'gray',
                        radius=sensor.r, label='sensor')
    renderer.draw_light(light_pos)

    output_dir = os.path.join(os.path.dirname(__file__), 'output')
    os.makedirs(output_dir, exist_ok=True)
    svg_file = os.path.join(output_dir, 'room_demo.svg')
    renderer.save(svg_file)
    csv_file = save_light_triangles_csv(central_fan, output_dir)

    print(f"Light triangles: {len(central_fan)}")
    print(f"Lit area: {lit_area(central_fan):.1f} of {light_map.get_room().area:.1f}")
    print(f"Sensor lit: {sensor_on}")
    print(f"SVG saved to: {svg_file}")
    print(f"CSV saved to: {csv_file}")


if __name__ == '__main__':
    main()
