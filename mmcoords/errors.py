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

"""Errors raised while converting coordinates."""


class ConversionError(ValueError):
  """Base class for known conversion failures."""


class OutOfRangeLatitudeError(ConversionError):

  def __init__(self):
    super().__init__("Latitude must be between -90 and 90 degrees")


class OutOfRangeLongitudeError(ConversionError):

  def __init__(self):
    super().__init__("Longitude must be between -180 and 180 degrees")


class UnrecognizedFormatError(ConversionError):
  pass


class UnsupportedGridPrecisionError(ConversionError):
  pass


class UnresolvableGridZoneError(ConversionError):
  pass
