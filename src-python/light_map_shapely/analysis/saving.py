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

===============================================================================
Light Map Export Utilities
===============================================================================
Utilities for exporting light map results to CSV:

- Collide point pairs (one row per sampled angle)
- Light triangles (one row per wedge of the fan)
===============================================================================
"""

import csv
from pathlib import Path
from typing import List, Union

from ..core.geometry import Triangle
from ..core.light_map import CollidePoints


def save_collide_points_csv(
    collide_points: CollidePoints,
    output_path: Union[str, Path],
    filename: str = "collide_points.csv",
    precision_coords: int = 4,
) -> Path:
    """
    Export collide point pairs to a CSV file.

    Args:
        collide_points: Pairs from LightMap.calculate_collide_points().
        output_path: Directory path where the CSV file will be saved.
        filename: Name of the output CSV file (default: "collide_points.csv").
        precision_coords: Decimal places for coordinate values (default: 4).

    Returns:
        Path: Full path to the created CSV file.

    Raises:
        OSError: If the output directory cannot be created or file cannot be written.
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)

    csv_file = output_dir / filename
    coord_fmt = f"{{:.{precision_coords}f}}"

    with open(csv_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(['pair_index', 'left_x', 'left_y', 'right_x', 'right_y'])

        for i, (left, right) in enumerate(collide_points):
            writer.writerow([
                i,
                coord_fmt.format(left.x),
                coord_fmt.format(left.y),
                coord_fmt.format(right.x),
                coord_fmt.format(right.y),
            ])

    return csv_file


def save_light_triangles_csv(
    triangles: List[Triangle],
    output_path: Union[str, Path],
    filename: str = "light_triangles.csv",
    precision_coords: int = 4,
) -> Path:
    """
    Export a light fan to a CSV file, one triangle per row.

    Columns p0_* hold the light position, p1_* and p2_* the far vertices,
    and area the triangle area.

    Returns:
        Path: Full path to the created CSV file.
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)

    csv_file = output_dir / filename
    coord_fmt = f"{{:.{precision_coords}f}}"

    with open(csv_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow([
            'triangle_index',
            'p0_x', 'p0_y',
            'p1_x', 'p1_y',
            'p2_x', 'p2_y',
            'area',
        ])

        for i, t in enumerate(triangles):
            writer.writerow([
                i,
                coord_fmt.format(t.p0.x), coord_fmt.format(t.p0.y),
                coord_fmt.format(t.p1.x), coord_fmt.format(t.p1.y),
                coord_fmt.format(t.p2.x), coord_fmt.format(t.p2.y),
                coord_fmt.format(t.area),
            ])

    return csv_file
