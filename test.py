#!/bin/env python
# -*- encoding: utf-8 -*-
################################################################################
## AtlasPack test suite
################################################################################

import datetime
import os
import random
import shutil
import tempfile
import unittest

from PIL import Image

import atlaspack
from atlas import (Atlas, AtlasResult, InvalidItemError, Item, PackError,
                   SizingError, pack, pack_guillotine, pack_maxrects)
from freespace import (cleanup_splits, handle_overlaps_and_splits,
                       prune_contained, prune_free_overlapping, split_against)
from geometry import (Rect, area, contains, fits, get_next_power_of_2, invalid_rect,
                      is_invalid, overlaps)
from header_writer import HeaderWriter
from layouts import GuillotineLayout, MaxRectsLayout, get_layout

################################################################################

def is_power_of_2(n):
    return n > 0 and n & (n - 1) == 0

class PackCheckMixin(object):
    def check_result(self, result, items):
        self.assertEqual(len(result.placements), len(items))
        self.assertEqual(len(result.items), len(items))
        self.assertTrue(is_power_of_2(result.width), result.width)
        self.assertTrue(is_power_of_2(result.height), result.height)

        bounds = Rect(result.width, result.height)
        for item, rect in result:
            self.assertEqual((rect.w, rect.h), (item.width, item.height))
            self.assertTrue(contains(rect, bounds), rect)

        for i, a in enumerate(result.placements):
            for b in result.placements[i+1:]:
                self.assertFalse(overlaps(a, b), '%r overlaps %r' % (a, b))

    def check_free_rects(self, free_rects, used_rects, disjoint):
        for free in free_rects:
            self.assertTrue(free.w > 0 and free.h > 0, free)
            for used in used_rects:
                self.assertFalse(overlaps(free, used), '%r overlaps %r' % (free, used))

        for i, a in enumerate(free_rects):
            for j, b in enumerate(free_rects):
                if i != j:
                    self.assertFalse(contains(a, b), '%r inside %r' % (a, b))
                    if disjoint:
                        self.assertFalse(overlaps(a, b), '%r overlaps %r' % (a, b))

################################################################################

class GeometryTest(unittest.TestCase):
    def test_overlaps(self):
        a = Rect(10, 10, 0, 0)
        self.assertTrue(overlaps(a, Rect(10, 10, 5, 5)))
        self.assertTrue(overlaps(a, Rect(2, 2, 4, 4)))
        self.assertFalse(overlaps(a, Rect(10, 10, 20, 20)))

    def test_touching_edges_do_not_overlap(self):
        a = Rect(10, 10, 0, 0)
        self.assertFalse(overlaps(a, Rect(10, 10, 10, 0)))
        self.assertFalse(overlaps(a, Rect(10, 10, 0, 10)))
        self.assertFalse(overlaps(a, Rect(10, 10, 10, 10)))

    def test_overlaps_is_symmetric(self):
        rects = [Rect(4, 4, 0, 0), Rect(4, 4, 3, 3), Rect(1, 8, 4, 0), Rect(2, 2, 6, 6)]
        for a in rects:
            for b in rects:
                self.assertEqual(overlaps(a, b), overlaps(b, a))

    def test_contains(self):
        big = Rect(10, 10, 0, 0)
        self.assertTrue(contains(big, big))
        self.assertTrue(contains(Rect(5, 10, 5, 0), big))
        self.assertFalse(contains(big, Rect(5, 10, 5, 0)))
        self.assertFalse(contains(Rect(5, 5, 6, 6), big))

    def test_fits(self):
        free = Rect(10, 5, 30, 30)
        self.assertTrue(fits(Item(10, 5), free))
        self.assertTrue(fits(Item(3, 3), free))
        self.assertFalse(fits(Item(5, 10), free))
        self.assertFalse(fits(Item(11, 1), free))

    def test_invalid_rect(self):
        self.assertTrue(is_invalid(invalid_rect()))
        self.assertFalse(is_invalid(Rect()))
        self.assertFalse(fits(Item(1, 1), invalid_rect()))

    def test_rect_equality(self):
        self.assertEqual(Rect(1, 2, 3, 4), Rect(1, 2, 3, 4))
        self.assertNotEqual(Rect(1, 2, 3, 4), Rect(2, 1, 3, 4))
        self.assertEqual(Rect(1, 2, 3, 4).astuple(), (3, 4, 1, 2))
        self.assertEqual((Rect(4, 2, 1, 1).right, Rect(4, 2, 1, 1).bottom), (5, 3))
        self.assertEqual(area(Rect(4, 3, 1, 1)), 12)
        self.assertEqual(area(Item(5, 2)), 10)

    def test_next_power_of_2(self):
        self.assertEqual(get_next_power_of_2(0), 0)
        self.assertEqual(get_next_power_of_2(1), 1)
        self.assertEqual(get_next_power_of_2(64), 64)
        self.assertEqual(get_next_power_of_2(65), 128)
        self.assertEqual(get_next_power_of_2(100), 128)

################################################################################

class FreeSpaceTest(unittest.TestCase):
    def test_split_against(self):
        result = split_against([Rect(10, 10)], Rect(4, 4, 3, 3))
        self.assertEqual(result, [
            Rect(10, 3, 0, 7),
            Rect(10, 3, 0, 0),
            Rect(3, 4, 0, 3),
            Rect(3, 4, 7, 3),
        ])

    def test_split_against_passes_disjoint_rects(self):
        free = [Rect(5, 5, 0, 0), Rect(5, 5, 5, 0)]
        self.assertEqual(split_against(free, Rect(5, 5, 0, 5)), free)

    def test_split_against_does_not_modify_input(self):
        free = [Rect(10, 10)]
        split_against(free, Rect(4, 4))
        self.assertEqual(free, [Rect(10, 10)])

    def test_split_against_corner(self):
        result = split_against([Rect(10, 10)], Rect(4, 4))
        self.assertEqual(result, [Rect(10, 6, 0, 4), Rect(6, 4, 4, 0)])

    def test_prune_contained(self):
        free = [Rect(2, 2), Rect(5, 5), Rect(5, 5), Rect(1, 1, 10, 10)]
        self.assertEqual(prune_contained(free), [Rect(5, 5), Rect(1, 1, 10, 10)])

    def test_prune_free_overlapping_keeps_overlap(self):
        free = [Rect(6, 10, 0, 0), Rect(10, 6, 0, 0)]
        self.assertEqual(prune_free_overlapping(free), free)

    def test_cleanup_splits(self):
        result = cleanup_splits([Rect(6, 10, 4, 0), Rect(10, 6, 0, 4)])
        self.assertEqual(result, [Rect(6, 4, 4, 0), Rect(10, 6, 0, 4)])

    def test_cleanup_splits_removes_contained(self):
        result = cleanup_splits([Rect(2, 2, 1, 1), Rect(8, 8)])
        self.assertEqual(result, [Rect(8, 8)])

    def test_handle_overlaps_and_splits(self):
        result = handle_overlaps_and_splits([Rect(10, 10)], Rect(4, 4, 3, 3))
        self.assertEqual(result, [
            Rect(3, 10, 0, 0),
            Rect(3, 10, 7, 0),
            Rect(10, 3, 0, 0),
            Rect(10, 3, 0, 7),
        ])

    def test_handle_overlaps_and_splits_skips_empty(self):
        result = handle_overlaps_and_splits([Rect(4, 4), Rect(2, 2, 8, 8)], Rect(4, 4))
        self.assertEqual(result, [Rect(2, 2, 8, 8)])

################################################################################

class LayoutTest(PackCheckMixin, unittest.TestCase):
    def test_get_layout(self):
        self.assertIs(get_layout('guillotine'), GuillotineLayout)
        self.assertIs(get_layout('MaxRects'), MaxRectsLayout)
        with self.assertRaises(ValueError):
            get_layout('skyline')

    def test_guillotine_place(self):
        layout = GuillotineLayout(10, 10)
        placed, remain = layout.add(Item(4, 4))
        self.assertEqual(placed, [Rect(4, 4, 0, 0)])
        self.assertEqual(remain, [])
        self.assertEqual(layout.free_rects, [Rect(6, 4, 4, 0), Rect(10, 6, 0, 4)])

    def test_guillotine_first_fit(self):
        layout = GuillotineLayout(10, 10)
        placed, remain = layout.add(Item(4, 4), Item(5, 5))
        self.assertEqual(placed, [Rect(4, 4, 0, 0), Rect(5, 5, 0, 4)])
        self.check_free_rects(layout.free_rects, layout.used_rects, disjoint=True)

    def test_guillotine_stops_at_first_failure(self):
        big, small = Item(8, 8), Item(1, 1)
        layout = GuillotineLayout(10, 10)
        placed, remain = layout.add(Item(6, 6), big, small)
        self.assertEqual(len(placed), 1)
        self.assertEqual(remain, [big, small])

    def test_maxrects_best_area(self):
        layout = MaxRectsLayout(10, 10)
        layout.free_rects = [Rect(10, 2, 0, 0), Rect(3, 3, 5, 5)]
        self.assertEqual(layout.search(Item(2, 2)), Rect(3, 3, 5, 5))

    def test_maxrects_short_side_tie(self):
        layout = MaxRectsLayout(10, 10)
        layout.free_rects = [Rect(4, 3, 0, 0), Rect(6, 2, 0, 5)]
        self.assertEqual(layout.search(Item(2, 2)), Rect(6, 2, 0, 5))

    def test_maxrects_long_side_tie(self):
        layout = MaxRectsLayout(10, 10)
        layout.free_rects = [Rect(2, 6, 0, 0), Rect(4, 3, 5, 5)]
        self.assertEqual(layout.search(Item(1, 2)), Rect(4, 3, 5, 5))

    def test_maxrects_full_tie_picks_first(self):
        layout = MaxRectsLayout(10, 10)
        layout.free_rects = [Rect(5, 5, 5, 5), Rect(5, 5, 0, 0)]
        self.assertEqual(layout.search(Item(5, 5)), Rect(5, 5, 5, 5))

    def test_maxrects_no_candidate(self):
        layout = MaxRectsLayout(10, 10)
        self.assertIsNone(layout.search(Item(11, 1)))

    def test_maxrects_place(self):
        layout = MaxRectsLayout(10, 10)
        placed, remain = layout.add(Item(4, 4), Item(3, 7), Item(2, 2))
        self.assertEqual(remain, [])
        self.assertEqual(placed[0], Rect(4, 4, 0, 0))
        self.check_free_rects(layout.free_rects, layout.used_rects, disjoint=False)

    def test_free_rects_stay_clean(self):
        rng = random.Random(7)
        items = [Item(rng.randint(1, 12), rng.randint(1, 12)) for _ in range(25)]
        for layout_type, disjoint in ((GuillotineLayout, True), (MaxRectsLayout, False)):
            layout = layout_type(128, 128)
            for item in items:
                placed, remain = layout.add(item)
                self.assertEqual(remain, [])
                self.check_free_rects(layout.free_rects, layout.used_rects, disjoint)

################################################################################

class PackTest(PackCheckMixin, unittest.TestCase):
    def test_guillotine_mixed(self):
        items = [Item(64, 64), Item(64, 32), Item(32, 64), Item(40, 40), Item(5, 10)]
        result = pack_guillotine(items)
        self.check_result(result, items)
        self.assertGreaterEqual(result.width, 64)
        self.assertGreaterEqual(result.height, 64)

    def test_single_item(self):
        for packer in (pack_guillotine, pack_maxrects):
            result = packer([Item(100, 50)])
            self.assertEqual(result.size, (128, 128))
            self.assertEqual(result.placements, [Rect(100, 50, 0, 0)])

    def test_identical_items(self):
        items = [Item(64, 32) for _ in range(10)]
        result = pack_maxrects(items)
        self.check_result(result, items)
        self.assertGreaterEqual(result.width * result.height, 10 * 64 * 32)

    def test_growth(self):
        items = [Item(65, 65), Item(65, 65)]
        for packer in (pack_guillotine, pack_maxrects):
            result = packer(items)
            self.check_result(result, items)
            self.assertEqual(result.size, (256, 128))
            self.assertEqual(result.placements, [Rect(65, 65, 0, 0), Rect(65, 65, 65, 0)])

    def test_outlier_forces_growth(self):
        items = [Item(9, 9) for _ in range(20)] + [Item(120, 120)]
        for packer in (pack_guillotine, pack_maxrects):
            result = packer(items)
            self.check_result(result, items)
            self.assertGreater(result.width * result.height, 128 * 128)
            self.assertGreaterEqual(max(result.size), 120)

    def test_random_items(self):
        rng = random.Random(1234)
        items = [Item(rng.randint(1, 48), rng.randint(1, 48), i) for i in range(60)]
        for packer in (pack_guillotine, pack_maxrects):
            result = packer(items)
            self.check_result(result, items)
            self.assertEqual(sorted(item.data for item in result.items), list(range(60)))

    def test_deterministic(self):
        rng = random.Random(99)
        items = [Item(rng.randint(1, 30), rng.randint(1, 30)) for _ in range(30)]
        for packer in (pack_guillotine, pack_maxrects):
            self.assertEqual(packer(items), packer(items))

    def test_guillotine_sort_order(self):
        a, b, c = Item(10, 40), Item(50, 5), Item(20, 20)
        items = [a, b, c]
        result = pack_guillotine(items)
        self.assertEqual(result.items, [b, a, c])
        self.assertEqual(items, [a, b, c])

    def test_maxrects_sort_order_is_stable(self):
        a, b, c = Item(10, 40), Item(50, 5), Item(20, 20)
        result = pack_maxrects([a, b, c])
        self.assertEqual(result.items, [a, c, b])

    def test_empty(self):
        for packer in (pack_guillotine, pack_maxrects):
            result = packer([])
            self.assertEqual(result, AtlasResult(0, 0, []))
            self.assertEqual(result.coverage, 0.0)

    def test_coverage(self):
        result = pack_maxrects([Item(64, 64)])
        self.assertEqual(result.size, (64, 64))
        self.assertEqual(result.coverage, 1.0)

    def test_min_size(self):
        result = pack([Item(10, 10)], 'guillotine', min_size=300)
        self.assertEqual(result.size, (512, 512))

    def test_payload_carried_through(self):
        result = pack_maxrects([Item(3, 3, 'small'), Item(8, 8, 'large')])
        self.assertEqual([item.data for item in result.items], ['large', 'small'])

################################################################################

class ErrorTest(unittest.TestCase):
    def test_invalid_items(self):
        for item in (Item(0, 5), Item(5, -1), Item(2.5, 3), Item(True, 3)):
            with self.assertRaises(InvalidItemError):
                pack_maxrects([Item(4, 4), item])

    def test_invalid_item_is_value_error(self):
        with self.assertRaises(ValueError):
            pack_guillotine([Item(0, 0)])

    def test_max_size_exceeded_on_growth(self):
        with self.assertRaises(SizingError) as cm:
            pack_guillotine([Item(65, 65), Item(65, 65)], max_size=128)
        self.assertIn('8450', str(cm.exception))

    def test_max_size_exceeded_at_start(self):
        with self.assertRaises(SizingError):
            pack_maxrects([Item(100, 50)], max_size=64)

    def test_sizing_error_is_pack_error(self):
        self.assertTrue(issubclass(SizingError, PackError))

    def test_growth_cap(self):
        atlas = Atlas('maxrects')
        atlas.initial_size([Item(1, 1)])
        atlas.size = 64, 64
        with self.assertRaises(SizingError) as cm:
            atlas.grow()
        self.assertIn('area cap 4096', str(cm.exception))

    def test_grow_doubles_shorter_side(self):
        atlas = Atlas('guillotine')
        atlas.initial_size([Item(100, 100)])
        atlas.size = 128, 128
        self.assertEqual(atlas.grow(), (256, 128))
        self.assertEqual(atlas.grow(), (256, 256))

    def test_unknown_layout(self):
        with self.assertRaises(ValueError):
            pack([Item(1, 1)], 'skyline')

    def test_bad_sizes(self):
        with self.assertRaises(ValueError):
            Atlas(min_size=-1)
        with self.assertRaises(ValueError):
            Atlas(min_size=256, max_size=64)

################################################################################

class HeaderWriterTest(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.path = os.path.join(self.dir, 'test.h')

    def tearDown(self):
        shutil.rmtree(self.dir)

    def read(self):
        with open(self.path) as f:
            return f.read()

    def test_guard_and_namespace(self):
        with HeaderWriter(self.path, 'TEST_H', 'ns') as header:
            header.write_variable('int', 'answer', '42')
        text = self.read()
        self.assertTrue(text.startswith('#ifndef TEST_H\n#define TEST_H\n'))
        self.assertIn('namespace ns {', text)
        self.assertIn('constexpr inline int answer=42;', text)
        self.assertTrue(text.endswith('}\n#endif'))

    def test_close_twice(self):
        header = HeaderWriter(self.path, 'TEST_H', raylib=True)
        header.write_byte_array('bytes', b'\x00\x7f\xff', constant=False)
        header.close()
        header.close()
        text = self.read()
        self.assertEqual(text.count('#endif'), 1)
        self.assertIn('#include <raylib.h>', text)
        self.assertNotIn('namespace', text)
        self.assertIn('inline std::array<std::uint8_t,3> bytes={0,127,255,};', text)

    def test_error_discards_header(self):
        with self.assertRaises(RuntimeError):
            with HeaderWriter(self.path, 'TEST_H', 'ns') as header:
                header.write_variable('int', 'answer', '42')
                raise RuntimeError('generation failed')
        self.assertFalse(os.path.exists(self.path))

################################################################################

class CliTest(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.red = self.image('red.png', (16, 8), (255, 0, 0, 255))
        self.blue = self.image('blue.png', (8, 8), (0, 0, 255, 255))
        self.out = os.path.join(self.dir, 'out', 'atlas.h')

    def tearDown(self):
        shutil.rmtree(self.dir)

    def image(self, name, size, color, mode='RGBA'):
        path = os.path.join(self.dir, name)
        if os.path.dirname(name):
            os.makedirs(os.path.dirname(path), exist_ok=True)
        Image.new(mode, size, color).save(path)
        return path

    def read(self, path=None):
        with open(path or self.out) as f:
            return f.read()

    def test_header(self):
        result = atlaspack.main('-i', self.red, self.blue, '-o', self.out)
        self.assertEqual(result.size, (16, 16))

        text = self.read()
        self.assertTrue(text.startswith(
            '#ifndef ATLAS_PACK_GENERATED_ATLAS_H\n#define ATLAS_PACK_GENERATED_ATLAS_H\n'))
        self.assertIn('namespace atlas_pack {', text)
        self.assertIn('atlas_info={.width=16,.height=16,.components_per_pixel=4};', text)
        self.assertIn('enum sprite_indices{red = 0,blue = 1,min_index=0,max_index=1,};', text)
        self.assertIn('sprite_info{0,0,16,8},sprite_info{0,8,8,8},};', text)
        self.assertIn('inline std::array<std::uint8_t,1024> atlas={255,0,0,255,', text)
        self.assertIn('normalized(const sprite_info sprite)', text)
        self.assertNotIn('sprite_filenames', text)
        self.assertNotIn('raylib', text)
        self.assertTrue(text.endswith('}\n#endif'))

    def test_png(self):
        atlaspack.main('-i', '%s,%s' % (self.red, self.blue), '-o', self.out, '-p')
        texture = Image.open(os.path.join(self.dir, 'out', 'atlas.png'))
        self.assertEqual(texture.size, (16, 16))
        self.assertEqual(texture.getpixel((0, 0)), (255, 0, 0, 255))
        self.assertEqual(texture.getpixel((0, 8)), (0, 0, 255, 255))
        self.assertEqual(texture.getpixel((15, 15)), (0, 0, 0, 0))

    def test_guillotine(self):
        result = atlaspack.main('-i', self.red, self.blue, '-o', self.out,
                                '-a', 'GUILLOTINE')
        self.assertEqual([spr.name for spr in result.items], ['red', 'blue'])
        self.assertEqual(result.placements, [Rect(16, 8, 0, 0), Rect(8, 8, 0, 8)])

    def test_debug_and_raylib(self):
        atlaspack.main('-i', self.red, self.blue, '-o', self.out, '--debug', '-r')
        text = self.read()
        self.assertIn('sprite_filenames={"red.png","blue.png",};', text)
        self.assertIn('get_sprite_index', text)
        self.assertIn('#include <raylib.h>', text)
        self.assertIn('raylib_atlas_texture', text)

    def test_no_namespace(self):
        atlaspack.main('-i', self.red, '-o', self.out, '-n', '')
        text = self.read()
        self.assertNotIn('namespace', text)
        self.assertTrue(text.endswith(';\n#endif'))

    def test_folder(self):
        self.image(os.path.join('sprites', 'green.png'), (4, 4), (0, 255, 0), 'RGB')
        with open(os.path.join(self.dir, 'sprites', 'notes.txt'), 'w') as f:
            f.write('not an image')
        result = atlaspack.main('-i', os.path.join(self.dir, 'sprites'), '-o', self.out)
        self.assertEqual([spr.name for spr in result.items], ['green'])
        self.assertEqual(result.items[0].image.mode, 'RGBA')

    def test_wildcard(self):
        result = atlaspack.main('-i', os.path.join(self.dir, '*.png'), '-o', self.out)
        self.assertEqual(sorted(spr.name for spr in result.items), ['blue', 'red'])

    def test_duplicates(self):
        other = self.image(os.path.join('other', 'red.png'), (2, 2), (1, 2, 3, 255))
        with self.assertRaises(ValueError):
            atlaspack.main('-i', self.red, other, '-o', self.out)
        result = atlaspack.main('-i', self.red, other, '-o', self.out, '-d')
        self.assertEqual(len(result.items), 2)

    def test_leading_digit(self):
        path = self.image('1up.png', (2, 2), (0, 0, 0, 255))
        with self.assertRaises(ValueError):
            atlaspack.main('-i', path, '-o', self.out)

    def test_missing_image(self):
        with self.assertRaises(ValueError):
            atlaspack.main('-i', os.path.join(self.dir, 'missing.png'), '-o', self.out)

    def test_no_inputs(self):
        with self.assertRaises(SystemExit): # "no inputs"
            atlaspack.main('-o', self.out)

    def test_bad_algorithm(self):
        with self.assertRaises(SystemExit): # "invalid choice"
            atlaspack.main('-i', self.red, '-a', 'skyline')

    def test_empty_output_name(self):
        with self.assertRaises(ValueError):
            atlaspack.main('-i', self.red, '-o', '')

    def test_max_size(self):
        with self.assertRaises(SizingError):
            atlaspack.main('-i', self.red, '-o', self.out, '--max-size', '8')

    def test_extras(self):
        path = os.path.join(self.dir, 'data.bin')
        with open(path, 'wb') as f:
            f.write(b'\x01\x02\xff')

        result = atlaspack.main('-e', path, '-o', self.out, '--debug')
        self.assertIsNone(result)

        text = self.read()
        self.assertIn('inline std::array<std::uint8_t,3> data_bin={1,2,255,};', text)
        self.assertIn('extra_filenames={"data.bin",};', text)
        self.assertIn('get_extra_symbol_index', text)
        self.assertIn('extra_symbol_info{static_cast<const void*>(data_bin.data()),'
                      'data_bin.size()},', text)
        self.assertNotIn('atlas_info', text)

    def test_duplicate_extras(self):
        path = os.path.join(self.dir, 'data.bin')
        with open(path, 'wb') as f:
            f.write(b'\x00')
        with self.assertRaises(ValueError):
            atlaspack.main('-e', path, path, '-o', self.out)

    def write_previous_header(self):
        os.makedirs(os.path.dirname(self.out))
        with open(self.out, 'w') as f:
            f.write('PREVIOUS HEADER')

    def test_missing_extra_keeps_previous_header(self):
        self.write_previous_header()
        path = os.path.join(self.dir, 'a.bin')
        with open(path, 'wb') as f:
            f.write(b'\x01')
        with self.assertRaises(ValueError):
            atlaspack.main('-e', path, os.path.join(self.dir, 'missing.bin'), '-o', self.out)
        self.assertEqual(self.read(), 'PREVIOUS HEADER')

    def test_bad_extra_name_keeps_previous_header(self):
        self.write_previous_header()
        path = os.path.join(self.dir, '2.bin')
        with open(path, 'wb') as f:
            f.write(b'\x01')
        with self.assertRaises(ValueError):
            atlaspack.main('-i', self.red, '-e', path, '-o', self.out, '-p')
        self.assertEqual(self.read(), 'PREVIOUS HEADER')
        self.assertFalse(os.path.exists(os.path.join(self.dir, 'out', 'atlas.png')))

    def test_sanitize_name(self):
        self.assertEqual(atlaspack.sanitize_name('Hero Sprite-1'), 'hero_sprite_1')
        with self.assertRaises(ValueError):
            atlaspack.sanitize_name('9lives')

    def test_guard_string(self):
        self.assertEqual(atlaspack.get_guard_string('out/my-atlas.h'),
                         'ATLAS_PACK_GENERATED_MY_ATLAS_H')

################################################################################

class TimerTest(unittest.TestCase):
    def test_strfdelta(self):
        self.assertEqual(atlaspack.strfdelta(datetime.timedelta(seconds=1, microseconds=5)),
                         '1.000005s')
        self.assertEqual(atlaspack.strfdelta(datetime.timedelta(seconds=3725)),
                         '1:02:05.000000')
        self.assertEqual(atlaspack.strfdelta(datetime.timedelta(days=2, seconds=61)),
                         '2d00:01:01.000000')

    def test_timer(self):
        with atlaspack.Timer('test') as timer:
            pass
        self.assertLessEqual(timer.start, timer.finish)

################################################################################

if __name__ == '__main__':
    import sys
    unittest.main(*sys.argv[1:])

################################################################################
## EOF
################################################################################
