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
from dataclasses import dataclass, field, InitVar
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from orderedmap.render import format_pairs
from orderedmap import debug


class UnhashableKeyError(TypeError):
  def __init__(self, key):
    super().__init__(
      "unhashable key of type '{}': {!r}".format(type(key).__name__, key))
    self.key = key


def is_hashable(key) -> bool:
  try:
    hash(key)
  except TypeError:
    return False
  return True


@dataclass(repr=False)
class OrderedMap:
  """
  A map that remembers the order in which its keys were first stored.

  Values live in a plain dict and the iteration order in a separate list
  of keys. Storing an existing key only replaces its value. Deleting a key
  and storing it again puts it last.

  Keys follow dict semantics: keys that compare equal and hash alike, such
  as 1, 1.0 and True, are the same key. The first one stored stays as the
  key and later stores only replace the value.

  Not thread safe. Callers sharing an instance between threads have to
  hold their own lock around every call.
  """
  pairs: InitVar[Optional[Iterable[Tuple[Any, Any]]]] = None
  _table: dict = field(default_factory=lambda: {}, init=False)
  _order: list = field(default_factory=lambda: [], init=False)

  def __post_init__(self, pairs):
    if pairs is not None:
      for key, value in pairs:
        self.store(key, value)

  def store(self, key, value) -> None:
    """
    Set the value for a key. An unhashable key raises UnhashableKeyError
    before anything is modified.
    """
    if not is_hashable(key):
      raise UnhashableKeyError(key)
    is_new = key not in self._table
    if is_new:
      self._order.append(key)
    self._table[key] = value
    if debug.is_logging('store'):
      debug.get('store').debug("store %r: new key? %s, position %d",
                               key, is_new, self._order.index(key))

  def load(self, key) -> Tuple[Any, bool]:
    """
    Return (value, True) for a stored key and (None, False) otherwise.
    """
    found = is_hashable(key) and key in self._table
    if debug.is_logging('load'):
      debug.get('load').debug("load %r: found? %s", key, found)
    if not found:
      return None, False
    return self._table[key], True

  def delete(self, key) -> None:
    if not is_hashable(key) or key not in self._table:
      if debug.is_logging('delete'):
        debug.get('delete').debug("delete %r: not present", key)
      return
    del self._table[key]
    self._order.remove(key)
    if debug.is_logging('delete'):
      debug.get('delete').debug("delete %r: %d keys left",
                                key, len(self._order))

  def length(self) -> int:
    return len(self._table)

  def range(self, visit: Callable[[Any, Any], bool]) -> None:
    """
    Call visit(key, value) for each key in order until it returns a false
    value.

    The order is snapshotted when the traversal starts. Keys the visitor
    deletes before they are reached are skipped and keys it adds are left
    for the next traversal.
    """
    for index, key in enumerate(list(self._order)):
      if key not in self._table:
        if debug.is_logging('range'):
          debug.get('range').debug("range: skip %r, deleted during range",
                                   key)
        continue
      if not visit(key, self._table[key]):
        if debug.is_logging('range'):
          debug.get('range').debug("range: stopped at index %d", index)
        break

  def _pairs(self) -> Iterator[Tuple[Any, Any]]:
    for key in self._order:
      yield key, self._table[key]

  def __copy__(self):
    return OrderedMap(self._pairs())

  def __len__(self):
    return self.length()

  def __str__(self):
    return format_pairs(self._pairs())

  def __repr__(self):
    return str(self)
