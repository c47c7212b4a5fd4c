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
import unittest

from orderedmap import OrderedMap
from orderedmap.render import format_item, format_pair, format_pairs


class RenderTest(unittest.TestCase):
  def test_empty(self):
    self.assertEqual("{}", format_pairs([]))
    self.assertEqual("{}", str(OrderedMap()))

  def test_single_key(self):
    om = OrderedMap()
    om.store("A", 1)
    self.assertEqual('{"A": 1}', str(om))

  def test_multiple_keys(self):
    om = OrderedMap()
    om.store("A", "a")
    om.store("B", "b")
    self.assertEqual('{"A": "a", "B": "b"}', str(om))

  def test_non_text_items(self):
    self.assertEqual("12", format_item(12))
    self.assertEqual("None", format_item(None))
    self.assertEqual("True", format_item(True))
    self.assertEqual("(1, 'x')", format_item((1, 'x')))
    self.assertEqual("b'x'", format_item(b'x'))

  def test_text_is_quoted_without_escaping(self):
    self.assertEqual('"say "hi""', format_item('say "hi"'))
    self.assertEqual('""', format_item(''))

  def test_pair(self):
    self.assertEqual('1: "Mike"', format_pair(1, "Mike"))

  def test_nested_map(self):
    inner = OrderedMap([("x", 1)])
    outer = OrderedMap([("inner", inner), (2, [1, "a"])])
    self.assertEqual('{"inner": {"x": 1}, 2: [1, \'a\']}', str(outer))

  def test_repr_matches_str(self):
    om = OrderedMap([("Name", "Bob"), ("Age", 12)])
    self.assertEqual(str(om), repr(om))

  def test_rendering_does_not_mutate(self):
    om = OrderedMap([("A", 1)])
    str(om)
    self.assertEqual(1, om.length())
    self.assertEqual((1, True), om.load("A"))


if __name__ == '__main__':
  unittest.main()
