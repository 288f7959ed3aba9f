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

"""Converts a free-form coordinate string into all supported formats.

Example:

  result = converter.convert_coordinates("JU9549568421")
  if result.is_valid:
    print(result.mgrs.formatted, coords.format_lat_lon(result.lat_lon))
  else:
    print(result.error)
"""

import dataclasses

from absl import logging
import dataclasses_json
import ml_collections
from mmcoords import coords
from mmcoords import errors
from mmcoords import formats
from mmcoords import grid_codec
from mmcoords import mgrs_lib
from mmcoords import utm_lib
from mmcoords.configs import default as default_config


@dataclasses.dataclass(frozen=True)
class ConversionResult(dataclasses_json.DataClassJsonMixin):
  """Snapshot of one conversion.

  Invalid results carry only `input_format` and `error`. Valid results always
  have `lat_lon` and `utm`, where `utm` is the projection of `lat_lon`;
  `mm_utm` and `mgrs` are set when the point can be expressed in them.
  """
  is_valid: bool
  input_format: formats.CoordinateFormat
  lat_lon: coords.LatLon | None = None
  utm: coords.Utm | None = None
  mm_utm: grid_codec.MyanmarGrid | None = None
  mgrs: mgrs_lib.Mgrs | None = None
  error: str | None = None


def _grid_offset(config: ml_collections.ConfigDict) -> tuple[int, int]:
  return (config.grid_offset.easting, config.grid_offset.northing)


def _to_local(lat_lon: coords.LatLon,
              config: ml_collections.ConfigDict) -> coords.LatLon:
  return coords.LatLon(lat_lon.latitude + config.datum_shift.lat,
                       lat_lon.longitude + config.datum_shift.lon)


def _to_wgs84(lat_lon: coords.LatLon,
              config: ml_collections.ConfigDict) -> coords.LatLon:
  return coords.LatLon(lat_lon.latitude - config.datum_shift.lat,
                       lat_lon.longitude - config.datum_shift.lon)


def _myanmar_grid_or_none(
    mgrs: mgrs_lib.Mgrs,
    config: ml_collections.ConfigDict) -> grid_codec.MyanmarGrid | None:
  try:
    return grid_codec.mgrs_to_myanmar_grid(mgrs, _grid_offset(config))
  except errors.UnresolvableGridZoneError as e:
    logging.info("No MM_UTM equivalent: %s", e)
    return None


def _from_lat_lon(raw: str,
                  config: ml_collections.ConfigDict) -> ConversionResult:
  lat_lon = formats.parse_lat_lon(raw)
  utm = coords.lat_lon_to_utm(lat_lon)
  wgs84 = _to_wgs84(lat_lon, config)
  if not utm_lib.MIN_BAND_LAT <= wgs84.latitude < utm_lib.MAX_BAND_LAT:
    logging.info("No MGRS equivalent outside the UTM bands: %s", lat_lon)
    return ConversionResult(True, formats.CoordinateFormat.LATLON,
                            lat_lon=lat_lon, utm=utm)
  mgrs = mgrs_lib.forward(wgs84, config.precision)
  return ConversionResult(True, formats.CoordinateFormat.LATLON,
                          lat_lon=lat_lon, utm=utm,
                          mm_utm=_myanmar_grid_or_none(mgrs, config),
                          mgrs=mgrs)


def _from_mgrs(mgrs: mgrs_lib.Mgrs, config: ml_collections.ConfigDict,
               input_format: formats.CoordinateFormat,
               mm_utm: grid_codec.MyanmarGrid | None) -> ConversionResult:
  lat_lon = _to_local(mgrs_lib.to_lat_lon(mgrs), config)
  utm = coords.lat_lon_to_utm(lat_lon)
  return ConversionResult(True, input_format, lat_lon=lat_lon, utm=utm,
                          mm_utm=mm_utm, mgrs=mgrs)


def _convert(raw: str, fmt: formats.CoordinateFormat,
             config: ml_collections.ConfigDict) -> ConversionResult:
  if fmt == formats.CoordinateFormat.LATLON:
    return _from_lat_lon(raw, config)
  clean = formats.normalize(raw)
  if fmt == formats.CoordinateFormat.MM_UTM:
    mm_utm = formats.parse_myanmar_grid(clean)
    mgrs = mgrs_lib.parse(
        grid_codec.myanmar_grid_to_mgrs(mm_utm, _grid_offset(config)))
    return _from_mgrs(mgrs, config, fmt, mm_utm)
  if fmt == formats.CoordinateFormat.MGRS:
    mgrs = mgrs_lib.parse(clean)
    if mgrs.precision not in grid_codec.PRECISIONS:
      raise errors.UnsupportedGridPrecisionError(
          f"Unsupported MGRS format: {clean}")
    return _from_mgrs(mgrs, config, fmt, _myanmar_grid_or_none(mgrs, config))
  raise errors.UnrecognizedFormatError(
      f"Unrecognized coordinate format: {raw.strip()}")


def convert_coordinates(
    raw: str,
    config: ml_collections.ConfigDict | None = None) -> ConversionResult:
  """Detects the format of `raw` and derives all other representations.

  Never raises for bad input: failures are returned as invalid results.

  Args:
    raw: A lat/lon pair, an MM_UTM reference or an MGRS reference.
    config: Conversion options, see `configs/default.py`.

  Returns:
    The conversion result.
  """
  if config is None:
    config = default_config.get_config()
  if config.datum_shift.lat or config.datum_shift.lon:
    logging.log_first_n(logging.WARNING,
                        "Applying unverified datum shift (%s, %s).", 1,
                        config.datum_shift.lat, config.datum_shift.lon)
  fmt = formats.detect(raw)
  try:
    return _convert(raw, fmt, config)
  except Exception as e:  # pylint: disable=broad-except
    logging.info("Failed to convert %r as %s: %s", raw, fmt.value, e)
    return ConversionResult(False, fmt, error=str(e) or "Conversion error")
