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

"""Myanmar grid (MM_UTM) references and their MGRS equivalents.

A Myanmar grid reference is two grid letters followed by two digit groups,
either 3+3 digits (100m, e.g. "JU958681") or 5+5 digits (1m, e.g.
"JU9549568421"). The letters are MGRS 100km square letters of UTM zones 46
and 47, so the MGRS zone prefix is recovered from fixed membership tables.

The 1m form is the MGRS square and digits verbatim. The legacy 100m form is
shifted by a fixed grid offset (+4 easting, -3 northing by default, in 100m
units). A digit group leaving [0, 999] wraps around and moves the matching
grid letter one step along `GRID_LETTERS`, like an odometer.

Some row letters are listed under two latitude bands of a zone. Such letters
are read in the southern band, so northern points that would decode there
have no Myanmar grid reference.
"""

import dataclasses

import dataclasses_json
from mmcoords import errors
from mmcoords import mgrs_lib

GRID_LETTERS = "ABCDEFGHJKLMNPQRSTUV"
PRECISIONS = (3, 5)
LEGACY_PRECISION = 3
DEFAULT_GRID_OFFSET = (4, -3)  # (easting, northing) in 100m units.

# MGRS column letters per zone, and row letters per (zone, latitude band).
ZONE_COLUMNS = (
    (47, frozenset("JKLMNPQR")),
    (46, frozenset("ABCDEFGH")),
)
ZONE_ROWS = {
    47: (("P", frozenset("LMNPQRST")),
         ("Q", frozenset("UVABCDEFG")),
         ("R", frozenset("HJKLM"))),
    46: (("P", frozenset("RSTUVABC")),
         ("Q", frozenset("DEFGHJKLM")),
         ("R", frozenset("NPQRS"))),
}


@dataclasses.dataclass(frozen=True)
class MyanmarGrid(dataclasses_json.DataClassJsonMixin):
  grid_zone: str
  easting: str
  northing: str
  formatted: str

  @classmethod
  def create(cls, grid_zone: str, easting: str,
             northing: str) -> "MyanmarGrid":
    return cls(grid_zone, easting, northing, f"{grid_zone}{easting}{northing}")

  @property
  def precision(self) -> int:
    return len(self.easting)


def _lookup_zone(letters: str) -> str | None:
  column, row = letters
  for zone, columns in ZONE_COLUMNS:
    if column not in columns:
      continue
    for band, rows in ZONE_ROWS[zone]:
      if row in rows:
        return f"{zone}{band}"
  return None


def resolve_mgrs_zone(letters: str) -> str:
  """Returns the MGRS grid zone (e.g. "47Q") of Myanmar grid letters."""
  zone = _lookup_zone(letters) if len(letters) == 2 else None
  if zone is None:
    raise errors.UnresolvableGridZoneError(
        f"Unable to determine MGRS zone for {letters}")
  return zone


def _step(letter: str, steps: int) -> str:
  index = GRID_LETTERS.index(letter) + steps
  return GRID_LETTERS[index % len(GRID_LETTERS)]


def _shift(digits: str, offset: int, letter: str) -> tuple[str, str]:
  """Adds `offset` to a 3-digit group, carrying into the grid letter."""
  value = int(digits) + offset
  if value > 999:
    value -= 1000
    letter = _step(letter, 1)
  elif value < 0:
    value += 1000
    letter = _step(letter, -1)
  return f"{value:03d}", letter


def _shift_reference(grid_zone: str, easting: str, northing: str,
                     offset: tuple[int, int]) -> tuple[str, str, str]:
  column, row = grid_zone
  easting, column = _shift(easting, offset[0], column)
  northing, row = _shift(northing, offset[1], row)
  return column + row, easting, northing


def _check_offset(offset: tuple[int, int]) -> None:
  # A single carry/borrow step is only guaranteed for offsets below 1000.
  if any(abs(x) >= 1000 for x in offset):
    raise ValueError(f"Grid offset must be within (-1000, 1000): {offset}")


def _decodes_to_same_square(mgrs: mgrs_lib.Mgrs, zone: str) -> bool:
  """Whether reading `mgrs` letters in table `zone` lands on the same square.

  Row letters repeat every 2,000km, so some letters are listed under two
  latitude bands of a zone. Neighbouring bands share a row cycle and still
  decode correctly; bands further apart do not.
  """
  if int(zone[:-1]) != mgrs.utm_zone_number:
    return False
  resolved = dataclasses.replace(mgrs, latitude_band=zone[-1])
  return mgrs_lib.square_origin(resolved) == mgrs_lib.square_origin(mgrs)


def mgrs_to_myanmar_grid(
    mgrs: mgrs_lib.Mgrs,
    grid_offset: tuple[int, int] = DEFAULT_GRID_OFFSET) -> MyanmarGrid:
  """Converts an MGRS reference in UTM zone 46 or 47 to a Myanmar grid one."""
  if mgrs.precision not in PRECISIONS:
    raise errors.UnsupportedGridPrecisionError(
        f"Unsupported MGRS format: {mgrs.formatted}")
  zone = resolve_mgrs_zone(mgrs.grid_square)
  if not _decodes_to_same_square(mgrs, zone):
    raise errors.UnresolvableGridZoneError(
        f"Unable to determine Myanmar grid zone for {mgrs.formatted}")
  if mgrs.precision != LEGACY_PRECISION:
    return MyanmarGrid.create(mgrs.grid_square, mgrs.easting, mgrs.northing)
  _check_offset(grid_offset)
  return MyanmarGrid.create(*_shift_reference(
      mgrs.grid_square, mgrs.easting, mgrs.northing, grid_offset))


def myanmar_grid_to_mgrs(
    grid: MyanmarGrid,
    grid_offset: tuple[int, int] = DEFAULT_GRID_OFFSET) -> str:
  """Converts a Myanmar grid reference to an MGRS reference string."""
  if (grid.precision not in PRECISIONS
      or len(grid.northing) != grid.precision):
    raise errors.UnsupportedGridPrecisionError(
        f"Unsupported MM_UTM format: {grid.formatted}")
  if len(grid.grid_zone) != 2 or any(
      c not in GRID_LETTERS for c in grid.grid_zone):
    raise errors.UnresolvableGridZoneError(
        f"Unable to determine MGRS zone for {grid.grid_zone}")
  letters, easting, northing = grid.grid_zone, grid.easting, grid.northing
  if grid.precision == LEGACY_PRECISION:
    _check_offset(grid_offset)
    letters, easting, northing = _shift_reference(
        letters, easting, northing, (-grid_offset[0], -grid_offset[1]))
  zone = _lookup_zone(letters)
  if zone is None:
    raise errors.UnresolvableGridZoneError(
        f"Unable to determine MGRS zone for {grid.grid_zone}")
  return f"{zone}{letters}{easting}{northing}"
