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

"""Detecting and parsing free-form coordinate strings."""

import enum
import math
import re

from absl import logging
from mmcoords import coords
from mmcoords import grid_codec


class CoordinateFormat(enum.Enum):
  LATLON = "LATLON"
  MM_UTM = "MM_UTM"
  MGRS = "MGRS"
  UNKNOWN = "UNKNOWN"


# Tested against the raw input, so that "-" and "." survive.
_LATLON_RE = re.compile(r"^\s*-?\d+(\.\d+)?\s*,\s*-?\d+(\.\d+)?\s*$")
_LATLON_SEPARATORS_RE = re.compile(r"[,\t]")
# Tested against the normalized input.
_MM_UTM_RE = re.compile(r"^[A-Z]{2}(\d{6}|\d{10})$")
_MGRS_RE = re.compile(r"^\d{1,2}[C-X][A-Z]{2}(\d\d){2,5}$")
_SEPARATORS_RE = re.compile(r"[\s-]")


def normalize(raw: str) -> str:
  """Drops whitespace and hyphens and uppercases."""
  return _SEPARATORS_RE.sub("", raw).upper()


def detect(raw: str) -> CoordinateFormat:
  """Returns the format of `raw`; the first matching rule wins."""
  clean = normalize(raw)
  if _LATLON_RE.match(raw) or _LATLON_SEPARATORS_RE.search(raw):
    fmt = CoordinateFormat.LATLON
  elif _MM_UTM_RE.match(clean):
    fmt = CoordinateFormat.MM_UTM
  elif _MGRS_RE.match(clean):
    fmt = CoordinateFormat.MGRS
  else:
    fmt = CoordinateFormat.UNKNOWN
  logging.debug("Detected %s for %r", fmt.value, raw)
  return fmt


def parse_lat_lon(raw: str) -> coords.LatLon:
  """Parses "lat,lon" (or tab separated), keeping signs and decimals."""
  parts = _LATLON_SEPARATORS_RE.split(raw.strip())
  if len(parts) != 2:
    raise ValueError(f"Expected `latitude, longitude`, got: {raw}")
  try:
    lat, lon = (float(p.strip()) for p in parts)
  except ValueError as e:
    raise ValueError(f"Invalid latitude/longitude pair: {raw}") from e
  if not (math.isfinite(lat) and math.isfinite(lon)):
    raise ValueError(f"Invalid latitude/longitude pair: {raw}")
  return coords.LatLon(lat, lon)


def parse_myanmar_grid(raw: str) -> grid_codec.MyanmarGrid:
  """Parses "JU958681" or "JU9549568421" (separators allowed)."""
  clean = normalize(raw)
  if not _MM_UTM_RE.match(clean):
    raise ValueError(f"Invalid MM_UTM reference: {raw}")
  digits = clean[2:]
  half = len(digits) // 2
  return grid_codec.MyanmarGrid.create(clean[:2], digits[:half], digits[half:])
