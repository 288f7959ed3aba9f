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

"""Tests for the coordinate converter."""

import json

from absl.testing import absltest
from absl.testing import parameterized
from mmcoords import converter
from mmcoords import coords
from mmcoords import formats
from mmcoords import mgrs_lib
from mmcoords.configs import default as default_config
import numpy as np

F = formats.CoordinateFormat
YANGON = (16.8794118, 96.1420957)


class ConverterTest(parameterized.TestCase):

  def assert_consistent(self, result):
    self.assertTrue(result.is_valid, result.error)
    self.assertIsNone(result.error)
    self.assertIsNotNone(result.lat_lon)
    self.assertEqual(result.utm, coords.lat_lon_to_utm(result.lat_lon))

  def test_lat_lon_to_all_formats(self):
    result = converter.convert_coordinates("20.7779105,95.2207137")
    self.assert_consistent(result)
    self.assertEqual(result.input_format, F.LATLON)
    self.assertEqual(result.lat_lon, coords.LatLon(20.7779105, 95.2207137))
    self.assertEqual(result.utm.zone, 46)
    self.assertEqual(result.mgrs.formatted, "46QGH3117999158")
    self.assertEqual(result.mm_utm.formatted, "GH3117999158")

  def test_lat_lon_yangon(self):
    result = converter.convert_coordinates("16.8794118, 96.1420957")
    self.assert_consistent(result)
    self.assertEqual(result.mgrs.formatted, "47QJU9549568421")
    self.assertEqual(result.mm_utm.formatted, "JU9549568421")
    self.assertEqual(result.mm_utm.grid_zone, "JU")

  def test_lat_lon_outside_myanmar_has_no_mm_utm(self):
    result = converter.convert_coordinates("40.7831, -73.9712")
    self.assert_consistent(result)
    self.assertEqual(result.mgrs.formatted, "18TWL8680715188")
    self.assertIsNone(result.mm_utm)

  def test_lat_lon_outside_mgrs_bands(self):
    result = converter.convert_coordinates("85, 10")
    self.assert_consistent(result)
    self.assertIsNone(result.mgrs)
    self.assertIsNone(result.mm_utm)

  def test_myanmar_grid_1m_to_all_formats(self):
    result = converter.convert_coordinates("JU9549568421")
    self.assert_consistent(result)
    self.assertEqual(result.input_format, F.MM_UTM)
    self.assertEqual(result.mm_utm.formatted, "JU9549568421")
    self.assertEqual(result.mgrs.formatted, "47QJU9549568421")
    self.assertEqual(result.utm.zone, 47)
    np.testing.assert_allclose(
        (result.lat_lon.latitude, result.lat_lon.longitude), YANGON,
        atol=1e-5)

  def test_myanmar_grid_100m_to_all_formats(self):
    result = converter.convert_coordinates("JU958681")
    self.assert_consistent(result)
    self.assertEqual(result.input_format, F.MM_UTM)
    self.assertEqual(result.mm_utm.formatted, "JU958681")
    self.assertEqual(result.mgrs.formatted, "47QJU954684")
    center = mgrs_lib.to_lat_lon(mgrs_lib.parse("47QJU954684"))
    self.assertEqual(result.lat_lon, center)

  def test_mgrs_to_all_formats(self):
    result = converter.convert_coordinates("47QJU9549568421")
    self.assert_consistent(result)
    self.assertEqual(result.input_format, F.MGRS)
    self.assertEqual(result.mgrs.formatted, "47QJU9549568421")
    self.assertEqual(result.mm_utm.formatted, "JU9549568421")
    np.testing.assert_allclose(
        (result.lat_lon.latitude, result.lat_lon.longitude), YANGON,
        atol=1e-5)

  def test_mgrs_with_separators(self):
    result = converter.convert_coordinates("47Q JU 95495 68421")
    self.assertEqual(result.mgrs.formatted, "47QJU9549568421")

  def test_mgrs_outside_myanmar_has_no_mm_utm(self):
    result = converter.convert_coordinates("18TWL8680715188")
    self.assert_consistent(result)
    self.assertIsNone(result.mm_utm)

  @parameterized.product(
      point_and_zone=[
          ((12.0, 98.7), "47P"),
          (YANGON, "47Q"),
          ((25.0, 97.0), "47R"),
          ((15.0, 95.0), "46P"),
          ((20.7779105, 95.2207137), "46Q"),
          ((26.0, 95.0), "46R"),
      ],
      precision_and_atol=[(5, 1e-5), (3, 1e-3)],
  )
  def test_lat_lon_myanmar_grid_round_trip(self, point_and_zone,
                                           precision_and_atol):
    point, zone = point_and_zone
    precision, atol = precision_and_atol
    config = default_config.get_config(f"precision={precision}")
    result = converter.convert_coordinates(f"{point[0]}, {point[1]}", config)
    self.assert_consistent(result)
    self.assertEqual(result.mgrs.grid_zone, zone)
    self.assertIsNotNone(result.mm_utm)

    back = converter.convert_coordinates(result.mm_utm.formatted, config)
    self.assert_consistent(back)
    self.assertEqual(back.utm.zone, result.utm.zone)
    self.assertIs(type(back.lat_lon.latitude), float)
    self.assertIs(type(back.lat_lon.longitude), float)
    np.testing.assert_allclose(
        (back.lat_lon.latitude, back.lat_lon.longitude), point, atol=atol)

  @parameterized.parameters(
      ("27.3333, 97.4", "47RLL4171424367"),  # Putao.
      ("27.2, 95.5", "46RGR4764311058"),
  )
  def test_northern_letters_shared_with_southern_band(self, raw, mgrs):
    result = converter.convert_coordinates(raw)
    self.assert_consistent(result)
    self.assertEqual(result.mgrs.formatted, mgrs)
    self.assertIsNone(result.mm_utm)

    from_mgrs = converter.convert_coordinates(mgrs)
    self.assert_consistent(from_mgrs)
    self.assertIsNone(from_mgrs.mm_utm)

  @parameterized.parameters(
      ("95, 10", F.LATLON, "Latitude must be between -90 and 90 degrees"),
      ("40.7831, 200", F.LATLON,
       "Longitude must be between -180 and 180 degrees"),
      ("12345", F.UNKNOWN, "Unrecognized coordinate format: 12345"),
      ("abc, def", F.LATLON, "Invalid latitude/longitude pair: abc, def"),
      ("ZZ999999", F.MM_UTM, "Unable to determine MGRS zone for ZZ"),
      ("47QJU95496842", F.MGRS, "Unsupported MGRS format: 47QJU95496842"),
      ("61QJU9549568421", F.MGRS,
       "Invalid MGRS zone number 61 in 61QJU9549568421"),
  )
  def test_invalid_input(self, raw, input_format, error):
    result = converter.convert_coordinates(raw)
    self.assertFalse(result.is_valid)
    self.assertEqual(result.input_format, input_format)
    self.assertEqual(result.error, error)
    self.assertIsNone(result.lat_lon)
    self.assertIsNone(result.utm)
    self.assertIsNone(result.mm_utm)
    self.assertIsNone(result.mgrs)

  def test_precision_config(self):
    config = default_config.get_config("precision=3")
    result = converter.convert_coordinates("16.8794118, 96.1420957", config)
    self.assert_consistent(result)
    self.assertEqual(result.mgrs.formatted, "47QJU954684")
    self.assertEqual(result.mm_utm.formatted, "JU958681")

  def test_invalid_precision_config(self):
    with self.assertRaises(ValueError):
      default_config.get_config("precision=4")

  def test_datum_shift_config(self):
    shift = (0.0028651, -0.0038338)
    config = default_config.get_config(
        f"lat_shift={shift[0]},lon_shift={shift[1]}")
    plain = converter.convert_coordinates("JU9549568421")
    shifted = converter.convert_coordinates("JU9549568421", config)
    self.assert_consistent(shifted)
    np.testing.assert_allclose(
        (shifted.lat_lon.latitude, shifted.lat_lon.longitude),
        (plain.lat_lon.latitude + shift[0],
         plain.lat_lon.longitude + shift[1]))
    self.assertEqual(shifted.mgrs, plain.mgrs)

    # Shifting back from the local point lands on the same grid reference.
    raw = f"{shifted.lat_lon.latitude}, {shifted.lat_lon.longitude}"
    back = converter.convert_coordinates(raw, config)
    self.assertEqual(back.mm_utm, plain.mm_utm)

  def test_repeated_calls_are_independent(self):
    first = converter.convert_coordinates("JU958681")
    converter.convert_coordinates("12345")
    self.assertEqual(converter.convert_coordinates("JU958681"), first)

  def test_to_json(self):
    result = converter.convert_coordinates("47QJU9549568421")
    d = json.loads(result.to_json())
    self.assertEqual(d["input_format"], "MGRS")
    self.assertTrue(d["is_valid"])
    self.assertEqual(d["mm_utm"]["formatted"], "JU9549568421")
    self.assertEqual(d["mgrs"]["utm_zone_number"], 47)
    self.assertEqual(d["utm"]["hemisphere"], "N")
    self.assertIsNone(d["error"])


if __name__ == "__main__":
  absltest.main()
