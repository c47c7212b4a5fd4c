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
import logging
import os
import re

ENV_VAR = 'ORDEREDMAP_DEBUG'

_logging_categories = ["store", "load", "delete", "range"]


def get(category):
  return logging.getLogger('orderedmap.' + category)


# Fill out map of flags
_logging_enabled = {category: False for category in _logging_categories}
_library_logger = logging.getLogger('orderedmap')
if not any(isinstance(h, logging.NullHandler)
           for h in _library_logger.handlers):
  _library_logger.addHandler(logging.NullHandler())
for cat in _logging_categories:
  l = get(cat)
  l.setLevel(logging.CRITICAL)


def is_logging(category):
  return _logging_enabled[category]


def _enable_logging(category):
  if category in _logging_categories:
    get(category).setLevel(logging.DEBUG)
    _logging_enabled[category] = True
  else:
    _library_logger.warning(
      "Unknown logging category '%s'", category)


def set_logging_categories(*categories):
  if categories:
    # Resolve 'all' into all logging categories
    if 'all' in categories:
      categories = _logging_categories
    # Enable all selected categories
    for cat in categories:
      _enable_logging(cat)


def reset_logging_categories():
  for cat in _logging_categories:
    get(cat).setLevel(logging.CRITICAL)
    _logging_enabled[cat] = False


def configure_from_env(environ=None):
  """
  Enable the categories listed in ORDEREDMAP_DEBUG, e.g. "store,delete"
  or "all". Categories enabled earlier are left as they are.
  """
  if environ is None:
    environ = os.environ
  value = environ.get(ENV_VAR, '')
  categories = [c for c in re.split(r'[\s,]+', value) if c]
  set_logging_categories(*categories)
  return categories


configure_from_env()
