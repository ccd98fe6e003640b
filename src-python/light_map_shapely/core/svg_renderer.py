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


from typing import Iterable, Optional, Tuple, TYPE_CHECKING

import svgwrite

from .geometry import Point, Line, Rect, Triangle

if TYPE_CHECKING:
    from .light_map import LightMap


class LightMapSVGRenderer:
    """
    SVG renderer for light maps.

    The SVG is organized into three layers (bottom to top):
    - light: Light triangle fans
    - objects: Room frame and obstacle segments (drawn above the light)
    - labels: Light markers and text annotations

    Coordinate System:
        Screen coordinates, positive Y points downward, matching the
        coordinates the light map works in. No flip transform is applied.

    Attributes:
        width (int): Canvas width in pixels
        height (int): Canvas height in pixels
        viewbox (tuple): SVG viewBox (min_x, min_y, width, height)
        dwg (svgwrite.Drawing): The SVG drawing object
    """

    def __init__(self, width=800, height=600, viewbox=None, background='rgb(45, 45, 45)'):
        """
        Initialize the SVG renderer.

        Args:
            width (int): Canvas width in pixels (default: 800)
            height (int): Canvas height in pixels (default: 600)
            viewbox (tuple or None): SVG viewBox as (min_x, min_y, width, height)
                                    If None, uses (0, 0, width, height)
            background (str or None): Background fill, None for transparent
        """
        self.width = width
        self.height = height
        self.viewbox = viewbox if viewbox is not None else (0, 0, width, height)

        # debug=False disables svgwrite's strict attribute validation
        self.dwg = svgwrite.Drawing(size=(f'{width}px', f'{height}px'),
                                    profile='full', debug=False)
        self.dwg.viewbox(*self.viewbox)

        if background is not None:
            self.dwg.add(self.dwg.rect(
                insert=(self.viewbox[0], self.viewbox[1]),
                size=(self.viewbox[2], self.viewbox[3]),
                fill=background
            ))

        self.layer_light = self.dwg.add(self.dwg.g(id='layer-light'))
        self.layer_objects = self.dwg.add(self.dwg.g(id='layer-objects'))
        self.layer_labels = self.dwg.add(self.dwg.g(id='layer-labels'))

    @staticmethod
    def _normalize_coord(value: float) -> float:
        """Map negative zero and values within 1e-10 of zero to 0.0."""
        if value == 0.0 or abs(value) < 1e-10:
            return 0.0
        return value

    def _xy(self, p: Point) -> Tuple[float, float]:
        return (self._normalize_coord(p.x), self._normalize_coord(p.y))

    def draw_room_frame(self, room: Rect, color='gray', stroke_width=4):
        """Draw the room outline."""
        self.layer_objects.add(self.dwg.rect(
            insert=self._xy(Point(room.x, room.y)),
            size=(room.w, room.h),
            fill='none',
            stroke=color,
            stroke_width=stroke_width,
            class_='room'
        ))

    def draw_segments(self, segments: Iterable[Line], color='seagreen', stroke_width=2):
        """Draw occluding segments as individual lines."""
        group = self.layer_objects.add(self.dwg.g(class_='segments'))
        for segment in segments:
            group.add(self.dwg.line(
                start=self._xy(segment.begin),
                end=self._xy(segment.end),
                stroke=color,
                stroke_width=stroke_width
            ))

    def draw_light_triangles(self, triangles: Iterable[Triangle], color='rgb(255, 255, 224)',
                             opacity=1.0):
        """
        Draw a light fan.

        Triangles are filled without stroke so that adjacent wedges do not
        leave visible seams. Several fans drawn with partial opacity
        accumulate like overlapping lights.
        """
        group = self.layer_light.add(self.dwg.g(class_='light-fan', opacity=opacity))
        for triangle in triangles:
            group.add(self.dwg.polygon(
                points=[self._xy(triangle.p0), self._xy(triangle.p1), self._xy(triangle.p2)],
                fill=color,
                stroke='none'
            ))

    def draw_light(self, point: Point, color='orange', radius=20, label: Optional[str] = None):
        """Draw the light position marker."""
        self.layer_labels.add(self.dwg.circle(
            center=self._xy(point),
            r=radius,
            fill=color,
            class_='light'
        ))
        if label:
            self.layer_labels.add(self.dwg.text(
                label,
                insert=self._xy(Point(point.x + radius + 2, point.y)),
                fill=color,
                font_size='12px',
                font_family='sans-serif'
            ))

    def draw_light_map(self, light_map: 'LightMap', light_pos: Point, color='rgb(255, 255, 224)', opacity=1.0):
        """
        Draw a full light map: the light fan, obstacle segments, room frame
        and the light marker.
        """
        self.draw_light_triangles(light_map.calculate_light_triangles(light_pos), color, opacity)
        self.draw_segments(light_map.segments)
        self.draw_room_frame(light_map.get_room())
        self.draw_light(light_pos)

    def save(self, filename: str = None):
        """
        Save the SVG to a file.

        Args:
            filename (str): Output filename (default: 'light_map.svg')
        """
        if filename is None:
            filename = "light_map.svg"
        self.dwg.saveas(filename)

    def to_string(self) -> str:
        """
        Get the SVG as a string.

        Returns:
            str: SVG content as XML string
        """
        return self.dwg.tostring()
