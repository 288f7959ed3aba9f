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

"""Working with lat/lon and UTM coordinates."""

import dataclasses

import dataclasses_json
from mmcoords import errors
from mmcoords import utm_lib
import pyproj

WGS84_EPSG = "EPSG:4326"


@dataclasses.dataclass(frozen=True)
class LatLon(dataclasses_json.DataClassJsonMixin):
  """WGS84 point in decimal degrees."""
  latitude: float
  longitude: float


@dataclasses.dataclass(frozen=True)
class Utm(dataclasses_json.DataClassJsonMixin):
  """Universal Transverse Mercator (UTM) coordinates.

  Attributes:
    zone: UTM zone number, 1 to 60.
    hemisphere: "N" or "S".
    easting: Easting in meters, rounded to centimeters.
    northing: Northing in meters, rounded to centimeters.
  """
  zone: int
  hemisphere: str
  easting: float
  northing: float

  @property
  def epsg(self) -> str:
    return utm_epsg(self.zone, self.hemisphere)


def utm_epsg(zone: int, hemisphere: str) -> str:
  return f"EPSG:32{6 if hemisphere == 'N' else 7}{zone:02}"


def validate_lat_lon(lat_lon: LatLon) -> None:
  if not -90 <= lat_lon.latitude <= 90:
    raise errors.OutOfRangeLatitudeError()
  if not -180 <= lat_lon.longitude <= 180:
    raise errors.OutOfRangeLongitudeError()


def lat_lon_to_utm(lat_lon: LatLon) -> Utm:
  """Projects a lat/lon point into its 6-degree UTM zone."""
  validate_lat_lon(lat_lon)
  lat, lon = lat_lon.latitude, lat_lon.longitude
  zone = utm_lib.zone_number(lon)
  hemisphere = utm_lib.hemisphere(lat)
  utm_crs = pyproj.CRS(utm_epsg(zone, hemisphere))
  easting, northing = pyproj.Transformer.from_crs(
      pyproj.CRS(WGS84_EPSG), utm_crs, always_xy=True
  ).transform(lon, lat)
  return Utm(zone, hemisphere, round(easting, 2), round(northing, 2))


def _format_number(x: float) -> str:
  return f"{x:.2f}".rstrip("0").rstrip(".")


def format_utm_coordinates(utm: Utm) -> str:
  return (f"{utm.zone}{utm.hemisphere} {_format_number(utm.easting)}E "
          f"{_format_number(utm.northing)}N")


def format_lat_lon(lat_lon: LatLon) -> str:
  return f"{lat_lon.latitude:.7f}, {lat_lon.longitude:.7f}"


def convert_dd_to_dms(value: float, is_latitude: bool) -> str:
  """Formats decimal degrees as degrees, minutes and seconds.

  Seconds are rounded to hundredths first so that e.g. 59.999" carries over
  into the minutes instead of printing as 60.00".

  Args:
    value: Angle in decimal degrees.
    is_latitude: Selects N/S instead of E/W for the hemisphere suffix.

  Returns:
    A string like `16° 52' 45.88" N`.
  """
  if is_latitude:
    direction = "N" if value >= 0 else "S"
  else:
    direction = "E" if value >= 0 else "W"
  centiseconds = round(abs(value) * 360_000)
  degrees, centiseconds = divmod(centiseconds, 360_000)
  minutes, centiseconds = divmod(centiseconds, 6_000)
  return f"{degrees}° {minutes}' {centiseconds / 100:.2f}\" {direction}"
