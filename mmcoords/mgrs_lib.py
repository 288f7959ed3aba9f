# Copyright 2025 DeepMind Technologies Limited.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Military Grid Reference System (MGRS) on top of the UTM library.

An MGRS reference is a UTM zone number, a latitude band letter, two letters
naming a 100km grid square and two equally long digit groups locating a point
within that square, e.g. "47QJU9549568421" (1m) or "47QJU954684" (100m).
"""

import dataclasses
import re

import dataclasses_json
from mmcoords import coords
from mmcoords import utm_lib

BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"
COLUMN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"  # Repeats every 3 zones.
ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"  # Repeats every 2,000km.
SQUARE_SIZE_M = 100_000
ROW_CYCLE_M = 2_000_000
MAX_PRECISION = 5

# Lower bound of the northing (in meters) within each latitude band. Used to
# pick the right 2,000km cycle for a row letter.
MIN_NORTHING = {
    "C": 1_100_000, "D": 2_000_000, "E": 2_800_000, "F": 3_700_000,
    "G": 4_600_000, "H": 5_500_000, "J": 6_400_000, "K": 7_300_000,
    "L": 8_200_000, "M": 9_100_000, "N": 0, "P": 800_000,
    "Q": 1_700_000, "R": 2_600_000, "S": 3_500_000, "T": 4_400_000,
    "U": 5_300_000, "V": 6_200_000, "W": 7_000_000, "X": 7_900_000,
}

_MGRS_RE = re.compile(r"^(\d{1,2})([A-Z])([A-Z])([A-Z])(\d*)$")


@dataclasses.dataclass(frozen=True)
class Mgrs(dataclasses_json.DataClassJsonMixin):
  """A parsed MGRS reference.

  Attributes:
    utm_zone_number: UTM zone, 1 to 60.
    latitude_band: Latitude band letter (C-X without I and O).
    grid_square: 100km square column and row letters.
    easting: Easting digits within the grid square.
    northing: Northing digits within the grid square.
    formatted: Canonical concatenation of all of the above.
  """
  utm_zone_number: int
  latitude_band: str
  grid_square: str
  easting: str
  northing: str
  formatted: str

  @classmethod
  def create(cls, utm_zone_number: int, latitude_band: str, grid_square: str,
             easting: str, northing: str) -> "Mgrs":
    formatted = (f"{utm_zone_number}{latitude_band}{grid_square}"
                 f"{easting}{northing}")
    return cls(utm_zone_number, latitude_band, grid_square, easting, northing,
               formatted)

  @property
  def grid_zone(self) -> str:
    return f"{self.utm_zone_number}{self.latitude_band}"

  @property
  def precision(self) -> int:
    return len(self.easting)

  @property
  def square_size_m(self) -> int:
    return 10 ** (MAX_PRECISION - self.precision)


def parse(reference: str) -> Mgrs:
  """Parses a normalized (uppercase, no separators) MGRS reference."""
  m = _MGRS_RE.match(reference)
  if not m:
    raise ValueError(f"Invalid MGRS reference: {reference}")
  zone, band, column, row, digits = m.groups()
  zone = int(zone)
  if not 1 <= zone <= 60:
    raise ValueError(f"Invalid MGRS zone number {zone} in {reference}")
  if band not in BAND_LETTERS:
    raise ValueError(f"Invalid MGRS latitude band {band} in {reference}")
  if column not in COLUMN_LETTERS or row not in ROW_LETTERS:
    raise ValueError(f"Invalid MGRS grid square {column}{row} in {reference}")
  if len(digits) % 2 or len(digits) > 2 * MAX_PRECISION:
    raise ValueError(f"Invalid MGRS digit groups in {reference}")
  half = len(digits) // 2
  return Mgrs.create(zone, band, column + row, digits[:half], digits[half:])


def _column_letter(zone: int, easting: float) -> str:
  set_offset = (zone - 1) % 3 * 8
  return COLUMN_LETTERS[(int(easting // SQUARE_SIZE_M) - 1 + set_offset)
                        % len(COLUMN_LETTERS)]


def _row_letter(zone: int, northing: float) -> str:
  index = int(northing // SQUARE_SIZE_M) % len(ROW_LETTERS)
  if zone % 2 == 0:
    index = (index + 5) % len(ROW_LETTERS)
  return ROW_LETTERS[index]


def forward(lat_lon: coords.LatLon, precision: int = MAX_PRECISION) -> Mgrs:
  """Encodes a WGS84 point as MGRS, truncating to `precision` digits."""
  if not 1 <= precision <= MAX_PRECISION:
    raise ValueError(f"MGRS precision must be in [1, 5], got {precision}")
  lat, lon = lat_lon.latitude, lat_lon.longitude
  if not utm_lib.MIN_BAND_LAT <= lat < utm_lib.MAX_BAND_LAT:
    raise ValueError(f"MGRS is not defined at latitude {lat}")
  easting, northing, zone, band = utm_lib.from_latlon(lat, lon)
  e = f"{int(easting % SQUARE_SIZE_M):05d}"[:precision]
  n = f"{int(northing % SQUARE_SIZE_M):05d}"[:precision]
  grid_square = _column_letter(zone, easting) + _row_letter(zone, northing)
  return Mgrs.create(zone, band, grid_square, e, n)


def square_origin(mgrs: Mgrs) -> tuple[int, int]:
  """Returns UTM easting/northing of the 100km square's south-west corner."""
  zone = mgrs.utm_zone_number
  column, row = mgrs.grid_square
  column_index = COLUMN_LETTERS.index(column) - (zone - 1) % 3 * 8
  if not 0 <= column_index < 8:
    raise ValueError(
        f"Grid column {column} is not used in zone {zone}: {mgrs.formatted}")
  easting = (column_index + 1) * SQUARE_SIZE_M

  row_index = ROW_LETTERS.index(row)
  if zone % 2 == 0:
    row_index = (row_index - 5) % len(ROW_LETTERS)
  northing = row_index * SQUARE_SIZE_M
  while northing < MIN_NORTHING[mgrs.latitude_band]:
    northing += ROW_CYCLE_M
  return easting, northing


def inverse(mgrs: Mgrs) -> tuple[float, float, float, float]:
  """Returns the bounding box of the reference as (south, west, north, east)."""
  x0, y0 = square_origin(mgrs)
  size = mgrs.square_size_m
  if mgrs.precision:
    x0 += int(mgrs.easting) * size
    y0 += int(mgrs.northing) * size
  zone, band = mgrs.utm_zone_number, mgrs.latitude_band
  south, west = utm_lib.to_latlon(x0, y0, zone, band, strict=False)
  north, east = utm_lib.to_latlon(x0 + size, y0 + size, zone, band,
                                  strict=False)
  # utm returns numpy scalars.
  return float(south), float(west), float(north), float(east)


def to_lat_lon(mgrs: Mgrs) -> coords.LatLon:
  """Returns the center of the grid square as the representative point."""
  south, west, north, east = inverse(mgrs)
  return coords.LatLon((south + north) / 2.0, (west + east) / 2.0)
