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

"""Default conversion config.

Example, converting to 100m references with the survey datum shift that was
observed near Yangon:

python -m mmcoords.convert_main \
--config=mmcoords/configs/default.py:precision=3,lat_shift=0.0028651,lon_shift=-0.0038338 \
"16.8794118, 96.1420957"
"""

from ml_collections import config_dict as cd
from mmcoords import grid_codec
from mmcoords import utils


def get_config(arg=None):
  arg = utils.parse_arg(arg, precision=5, lat_shift=0.0, lon_shift=0.0)
  if arg.precision not in grid_codec.PRECISIONS:
    raise ValueError(f"Precision must be one of {grid_codec.PRECISIONS}, "
                     f"got {arg.precision}")
  config = cd.ConfigDict()
  config.precision = arg.precision  # Digits per group for derived grids.

  # Local datum = WGS84 + shift, in degrees. Applied between the lat/lon the
  # user sees and the grid references.
  config.datum_shift = cd.ConfigDict()
  config.datum_shift.lat = arg.lat_shift
  config.datum_shift.lon = arg.lon_shift

  # Offset of 100m Myanmar grid digits from MGRS digits, in 100m units.
  config.grid_offset = cd.ConfigDict()
  config.grid_offset.easting = grid_codec.DEFAULT_GRID_OFFSET[0]
  config.grid_offset.northing = grid_codec.DEFAULT_GRID_OFFSET[1]
  return config
