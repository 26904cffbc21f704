#!/bin/env python
# -*- encoding: utf-8 -*-
################################################################################
## AtlasPack - pack images into a texture atlas embedded in a C++ header
##
## Released under the MIT License.
##
################################################################################

import logging
log = logging.getLogger(__name__)

import os
import re
import sys

from PIL import Image

from atlas import Item, PackError, pack
from header_writer import HeaderWriter
from layouts import LAYOUTS

################################################################################

import datetime

def strfdelta(dt):
    dy = dt.days
    ts = dt.seconds

    hr = (ts // 3600)
    mn = (ts //   60) % 60
    sc = (ts        ) % 60

    us = dt.microseconds

    if dy:
        return '%dd%02d:%02d:%02d.%06d' % (dy, hr, mn, sc, us)
    elif hr:
        return '%d:%02d:%02d.%06d' % (hr, mn, sc, us)
    elif mn:
        return '%d:%02d.%06d' % (mn, sc, us)
    else:
        return '%d.%06ds' % (sc, us)

class Timer(object):
    def __init__(self, name='Timer'):
        self.name = name
        self.start = None
        self.finish = None

    def __enter__(self):
        self.start = datetime.datetime.now()
        log.debug("%s: start: %s", self.name, self.start.strftime('%H:%M:%S'))
        return self

    def __exit__(self, *exc_info):
        self.finish = datetime.datetime.now()
        log.debug("%s: end: %s", self.name, self.finish.strftime('%H:%M:%S'))
        log.debug("%s: duration: %s", self.name, strfdelta(self.finish - self.start))

################################################################################

def sanitize_name(name):
    """
    Turn a file name into a C++ identifier: lower case, with anything that is
    not a letter or digit replaced by an underscore.
    """
    if name[:1].isdigit():
        raise ValueError("File '%s' cannot begin with a digit because of "
                         "internal sanitization rules." % name)

    return re.sub(r'[^0-9a-z]', '_', name.lower())

def get_guard_string(filename):
    stem = os.path.splitext(os.path.basename(filename))[0]
    return 'ATLAS_PACK_GENERATED_%s_H' % re.sub(r'[^0-9A-Za-z]', '_', stem).upper()

################################################################################

class Sprite(Item):
    def __init__(self, filename):
        with Image.open(filename) as image:
            if image.mode != 'RGBA':
                log.info("image '%s': was not RGBA originally but has been "
                         "converted to RGBA", os.path.basename(filename))
                image = image.convert('RGBA')
            else:
                image = image.copy()

        w, h = image.size
        super(Sprite, self).__init__(w, h, image)

        self.filename = filename
        self.basename = os.path.basename(filename)
        self.stem = os.path.splitext(self.basename)[0]
        self.name = sanitize_name(self.stem)

    @property
    def image(self):
        return self.data

    def __repr__(self):
        return 'Sprite<%s %dx%d>' % (self.basename, self.width, self.height)

################################################################################

def load_sprites(filenames, duplicates=False):
    """
    Load every image named by `filenames`, which may be files, wildcards or
    folders.  Files inside folders that are not images are skipped; an image
    named directly that cannot be loaded is an error.
    """
    from glob import glob

    r = []

    def add(spr):
        if not duplicates:
            for other in r:
                if other.stem == spr.stem:
                    raise ValueError("File '%s' already loaded." % spr.filename)
        r.append(spr)

    with Timer('load sprites'):
        for fn in filenames:
            for f in sorted(glob(fn)) or [fn]:
                if os.path.isdir(f):
                    for root, dirs, files in os.walk(f):
                        dirs.sort()
                        for ff in sorted(files):
                            try:
                                spr = Sprite(os.path.join(root, ff))
                            except IOError:
                                ## Not an image file?
                                log.debug('skipping %s', os.path.join(root, ff))
                                continue
                            add(spr)

                else:
                    try:
                        spr = Sprite(f)
                    except IOError as e:
                        raise ValueError('failed to load image: %s: %s' % (f, e))
                    add(spr)

    return r

################################################################################

def build_texture(result):
    texture = Image.new('RGBA', result.size)

    with Timer('build texture'):
        for i, (spr, rect) in enumerate(result):
            if (rect.w, rect.h) != spr.image.size:
                raise ValueError('Image and rectangle sort mismatch at index %d' % i)
            texture.paste(spr.image, (rect.x, rect.y))

    return texture

################################################################################

def generate_structures(header, texture):
    w, h = texture.size
    header.write(
        'inline constexpr struct atlas_info{unsigned int width,height,'
        'components_per_pixel;}'
        'atlas_info={.width=%d,.height=%d,.components_per_pixel=%d};'
        % (w, h, len(texture.getbands())))
    header.write('struct sprite_info{unsigned int x,y,width,height;};')
    header.write('struct uv_coords{float u0,v0,u1,v1;};')

def generate_sprite_filename_array(header, sprites):
    names = ''.join('"%s",' % spr.basename for spr in sprites)
    header.write('inline constexpr std::array<const char*,%d> '
                 'sprite_filenames={%s};' % (len(sprites), names))

def index_by_name_function(function, table, count):
    return (
        'inline constexpr int %s(const char* string){'
          'const auto& name_length=[](const char* str)constexpr{'
            'unsigned int count = 0;'
            "while (*str!='\\0')++count,++str;"
            'return count;'
            '};'
          'for(unsigned int i=0;i<%d;i++){'
            'if(name_length(string)!=name_length(%s[i]))continue;'
            'const char* tmp=%s[i];'
            "while(*string!='\\0'&&*string==*tmp)++string,++tmp;"
            'if(static_cast<unsigned char>(*string)-static_cast<unsigned char>(*tmp)==0)return i;'
          '}'
          'return -1;'
        '}' % (function, count, table, table))

def generate_utility_functions(header, count, debug=False):
    if debug:
        header.write(index_by_name_function('get_sprite_index', 'sprite_filenames', count))

    header.write(
        'inline constexpr uv_coords normalized(const sprite_info sprite){'
        'return{sprite.x/float(atlas_info.width),sprite.y/float(atlas_info.height),'
        '(sprite.x+sprite.width)/float(atlas_info.width),'
        '(sprite.y+sprite.height)/float(atlas_info.height)}; }')

def generate_variables(header, result):
    count = len(result.placements)

    enum = ''.join('%s = %d,' % (spr.name, i) for i, spr in enumerate(result.items))
    header.write('enum sprite_indices{%smin_index=0,max_index=%d,};' % (enum, count - 1))

    header.write('inline constexpr std::array<sprite_info,%d>sprites={' % count)
    header.write(''.join('sprite_info{%d,%d,%d,%d},' % rect.astuple()
                         for rect in result.placements) + '};')

def generate_raylib_function_defs(header):
    header.write(
        'inline Image raylib_atlas_image(){'
          'return Image{reinterpret_cast<void*>(const_cast<%s*>(atlas.data())),'
          'atlas_info.width,atlas_info.height,'
          '1,PIXELFORMAT_UNCOMPRESSED_R8G8B8A8};'
        '}' % header.byte_type)
    header.write(
        'inline Texture2D raylib_atlas_texture(){'
          'return LoadTextureFromImage(raylib_atlas_image());'
        '}')

################################################################################

def generate_extra_lookup_info(header, symbols, basenames):
    names = ''.join('"%s",' % name for name in basenames)
    header.write('inline constexpr std::array<const char*,%d>'
                 'extra_filenames={%s};' % (len(basenames), names))

    header.write(index_by_name_function('get_extra_symbol_index', 'extra_filenames',
                                        len(symbols)))

    header.write('struct extra_symbol_info{const void* data; std::size_t size;};')
    table = ''.join(
        'extra_symbol_info{static_cast<const void*>(%s.data()),%s.size()},' % (sym, sym)
        for sym in symbols)
    header.write('inline constexpr std::array<extra_symbol_info,%d>'
                 'extra_symbol_table={%s};' % (len(symbols), table))

def load_extra_files(extras):
    """
    Read every extra file up front so that a bad one fails before the header
    is opened.  Returns (basename, symbol, data) tuples in input order.
    """
    r = []
    basenames = []

    with Timer('load extra files'):
        for filename in extras:
            basename = os.path.basename(filename)
            if basename in basenames:
                raise ValueError("File '%s' already embedded" % filename)
            basenames.append(basename)

            symbol = sanitize_name(basename)

            try:
                with open(filename, 'rb') as f:
                    data = f.read()
            except IOError as e:
                raise ValueError('%s: failed to open: reason: %s' % (filename, e.strerror))

            r.append((basename, symbol, data))

    return r

def generate_extra_files_arrays(header, extras, debug=False):
    for basename, symbol, data in extras:
        header.write_byte_array(symbol, data)
        log.debug('embedded %s as %s (%d bytes)', basename, symbol, len(data))

    if debug:
        generate_extra_lookup_info(header,
                                   [symbol for _, symbol, _ in extras],
                                   [basename for basename, _, _ in extras])

def generate_atlas_header(header, args, result=None, texture=None, extras=()):
    if result is not None:
        generate_structures(header, texture)
        if args.debug:
            generate_sprite_filename_array(header, result.items)
        generate_utility_functions(header, len(result.items), args.debug)
        generate_variables(header, result)

        ## main atlas array
        header.write_byte_array('atlas', texture.tobytes())

    if extras:
        generate_extra_files_arrays(header, extras, args.debug)

    if result is not None and header.raylib:
        generate_raylib_function_defs(header)

################################################################################

def split_names(groups):
    r = []
    for group in groups:
        for value in group:
            r.extend(name for name in value.split(',') if name)
    return r

def build_arg_parser():
    import argparse

    parser = argparse.ArgumentParser(usage='%(prog)s -i images... [-e extras...] [options]')

    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help="Print more detailed messages.")

    ########################################################################

    input_group = parser.add_argument_group('input options')
    input_group.add_argument('-i', '--images', action='append', nargs='+', default=[],
                             metavar='IMAGE',
                             help="Images / folders / wildcards to pack. "
                             "Comma separated lists are accepted.")
    input_group.add_argument('-e', '--extras', action='append', nargs='+', default=[],
                             metavar='FILE',
                             help="Extra files to embed as byte arrays. "
                             "Comma separated lists are accepted.")
    input_group.add_argument('-d', '--duplicates', action='store_true', default=False,
                             help="Allow images with the same name to be packed.")

    ########################################################################

    layout_group = parser.add_argument_group('layout options')
    layout_group.add_argument('-a', '--algorithm', type=str.lower, default='maxrects',
                              metavar='TYPE', choices=sorted(LAYOUTS),
                              help="Select layout algorithm: %(choices)s. "
                              "(default: %(default)s)")
    layout_group.add_argument('--min-size', type=int, default=0, metavar='SIZE',
                              help="Set minimum atlas dimensions.")
    layout_group.add_argument('--max-size', type=int, default=0, metavar='SIZE',
                              help="Set maximum atlas dimensions.")

    ########################################################################

    output_group = parser.add_argument_group('output options')
    output_group.add_argument('-o', '--out', default='atlas_pack.h', metavar='FILE',
                              help="File name of the generated header. "
                              "(default: %(default)s)")
    output_group.add_argument('-n', '--namespace', default='atlas_pack', metavar='NAME',
                              help="Namespace the symbols are placed under; "
                              "empty for none. (default: %(default)s)")
    output_group.add_argument('-r', '--raylib', action='store_true', default=False,
                              help="Add raylib utility functions.")
    output_group.add_argument('-p', '--png', action='store_true', default=False,
                              help="Also save the atlas as a PNG beside the header.")
    output_group.add_argument('--debug', action='store_true', default=False,
                              help="Export extra symbols that help with debugging.")

    ########################################################################

    return parser

################################################################################

def main(*argv):
    parser = build_arg_parser()

    args = parser.parse_args(argv)
    args.images = split_names(args.images)
    args.extras = split_names(args.extras)

    logging.basicConfig(level=logging.INFO)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.images and not args.extras:
        parser.error('no image inputs or extra files provided; '
                     'please provide at least one type')

    if not args.out:
        raise ValueError('Empty output header filename not allowed')

    path = os.path.dirname(args.out)
    if path and not os.path.isdir(path):
        os.makedirs(path)

    result = None
    texture = None

    ## fail on bad extras before anything is written
    extras = load_extra_files(args.extras)

    if args.images:
        ####################################################################
        ## Phase 1 - Load sprites

        sprites = load_sprites(args.images, args.duplicates)

        if not sprites:
            raise ValueError('No sprites found.')

        ####################################################################
        ## Phase 2 - Arrange sprites in the atlas

        with Timer('generate atlas layout'):
            result = pack(sprites, args.algorithm,
                          min_size=args.min_size, max_size=args.max_size)

        log.info('Atlas Size: %dx%d (%d sprites, %.1f%% coverage)',
                 result.width, result.height, len(result.items),
                 100 * result.coverage)

        ####################################################################
        ## Phase 3 - Build texture

        texture = build_texture(result)

        if args.png:
            pngname = os.path.splitext(args.out)[0] + '.png'
            texture.save(pngname)
            log.info('Output png: %s', pngname)

    ########################################################################
    ## Phase 4 - Write header

    with Timer('write header'):
        with HeaderWriter(args.out, get_guard_string(args.out),
                          args.namespace, args.raylib) as header:
            generate_atlas_header(header, args, result, texture, extras)

    log.info('Output Header: %s', args.out)

    return result

def run():
    try:
        main(*sys.argv[1:])
    except (ValueError, PackError) as e:
        log.error('%s', e)
        sys.exit(1)

################################################################################

if __name__ == '__main__':
    run()

################################################################################
## EOF
################################################################################
