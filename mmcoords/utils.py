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

"""Utils."""

import ml_collections as mlc


def parse_arg(arg: str | None, **defaults) -> mlc.ConfigDict:
  """Parses the single-string argument of a config's get_config.

  Example use in a config file:

    def get_config(arg=None):
      arg = utils.parse_arg(arg, precision=5, lat_shift=0.0)
      config.precision = arg.precision

  Ways that values can be passed on the command line:

    --config default.py:precision=3,lat_shift=0.0028651
    --config default.py:3  # The first option may be passed unnamed alone.

  Args:
    arg: the string argument that's passed to get_config.
    **defaults: the name and default value of each option. Passed values are
      converted to the type of the default.

  Returns:
    ConfigDict object with extracted type-converted values.

  Raises:
    ValueError: for options not in `defaults` or values of the wrong type.
  """
  arg = arg or ""
  if arg and "," not in arg and "=" not in arg and defaults:
    arg = f"{next(iter(defaults))}={arg}"

  raw_kv = dict(raw_arg.split("=", 1) if "=" in raw_arg else (raw_arg, "")
                for raw_arg in arg.split(",") if raw_arg)

  result = mlc.ConfigDict(type_safe=False)  # For convenient dot-access only.
  for name, default in defaults.items():
    val = raw_kv.pop(name, None)
    result[name] = type(default)(val) if val is not None else default
  if raw_kv:
    raise ValueError(f"Unhandled config args remain: {raw_kv}")
  return result
