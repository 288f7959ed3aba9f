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

"""A wrapper around UTM library with plain 6-degree zone selection."""

import math

import utm as utm_lib

# Latitudes covered by the lettered UTM bands (and hence by MGRS).
MIN_BAND_LAT = -80.0
MAX_BAND_LAT = 84.0


def zone_number(longitude: float) -> int:
  """Returns the 6-degree zone, without the Norway/Svalbard exceptions."""
  zone = math.floor((longitude + 180) / 6) + 1
  return max(1, min(60, zone))


def hemisphere(latitude: float) -> str:
  return "N" if latitude >= 0 else "S"


def latitude_band(latitude: float) -> str | None:
  return utm_lib.latitude_to_zone_letter(latitude)


def to_latlon(easting, northing, zone, zone_letter=None,
              northern=None, strict=True):
  return utm_lib.to_latlon(easting, northing, zone, zone_letter,
                           northern, strict)


def from_latlon(latitude, longitude):
  """Projects into the zone given by `zone_number`, unlike `utm` defaults."""
  return utm_lib.from_latlon(latitude, longitude,
                             force_zone_number=zone_number(longitude),
                             force_zone_letter=latitude_band(latitude))
