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

"""Converts coordinates given on the command line.

Example command line:
python -m mmcoords.convert_main "16.8794118, 96.1420957" JU9549568421 \
--output=json
"""

import os

from absl import app
from absl import flags
from absl import logging
from ml_collections import config_flags
from mmcoords import converter
from mmcoords import coords

_DEFAULT_CONFIG = os.path.join(
    os.path.dirname(__file__), "configs", "default.py")

flags.DEFINE_enum("output", "text", ["text", "json"], "Output format.")
config_flags.DEFINE_config_file(
    "config", _DEFAULT_CONFIG, "Conversion config.", lock_config=True)
FLAGS = flags.FLAGS


def format_result(raw: str, result: converter.ConversionResult) -> str:
  """Renders a result the way the converter form displayed it."""
  lines = [f"Input: {raw}"]
  if not result.is_valid:
    lines.append(f"Error: {result.error}")
    return "\n".join(lines)
  lat_lon = result.lat_lon
  lines += [
      f"Detected format: {result.input_format.value}",
      f"Lat/Lon: {coords.format_lat_lon(lat_lon)}",
      ("DMS: "
       f"{coords.convert_dd_to_dms(lat_lon.latitude, is_latitude=True)}, "
       f"{coords.convert_dd_to_dms(lat_lon.longitude, is_latitude=False)}"),
      f"UTM: {coords.format_utm_coordinates(result.utm)}",
  ]
  if result.mm_utm:
    lines.append(f"MM_UTM: {result.mm_utm.formatted}")
  if result.mgrs:
    lines.append(f"MGRS: {result.mgrs.formatted}")
  return "\n".join(lines)


def main(argv):
  inputs = argv[1:]
  if not inputs:
    raise app.UsageError("Pass at least one coordinate to convert.")
  logging.info("Config: %s", FLAGS.config)
  failed = 0
  for raw in inputs:
    result = converter.convert_coordinates(raw, FLAGS.config)
    failed += not result.is_valid
    if FLAGS.output == "json":
      print(result.to_json(ensure_ascii=False))
    else:
      print(format_result(raw, result))
  return 1 if failed else 0


def run():
  app.run(main)


if __name__ == "__main__":
  run()
