#!/usr/bin/env python
# encoding: utf-8
# Copyright 2016-2021 Alexander Mollberg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from typing import Any, Iterable, Tuple


def format_item(obj: Any) -> str:
  """
  Render a single key or value. Text is quoted, everything else is
  rendered with str().
  """
  if isinstance(obj, str):
    return '"{}"'.format(obj)
  return str(obj)


def format_pair(key: Any, value: Any) -> str:
  return "{}: {}".format(format_item(key), format_item(value))


def format_pairs(pairs: Iterable[Tuple[Any, Any]]) -> str:
  return "{" + ", ".join([format_pair(k, v) for k, v in pairs]) + "}"
