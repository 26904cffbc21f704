# -*- encoding: utf-8 -*-
################################################################################
## AtlasPack C++ header writer
##
## Writes a single self-contained header: include guard, standard includes,
## an optional namespace, and whatever declarations the caller adds.
################################################################################

__all__ = ['HeaderWriter']

import logging
log = logging.getLogger(__name__)

import os

################################################################################

class HeaderWriter(object):
    byte_type = 'std::uint8_t'

    def __init__(self, path, guard, namespace='', raylib=False):
        self.path = path
        self.raylib = raylib
        self.namespace = namespace
        self.closed = False

        self.file = open(path, 'w')

        self.write('#ifndef %s\n#define %s\n' % (guard, guard))
        self.write('#include<array>\n')
        self.write('#include <cstdint>\n')
        self.write('#include <cstddef>\n')

        if raylib:
            self.write('#include <raylib.h>\n')

        if namespace:
            self.write('namespace %s {' % namespace)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        if exc_info[0] is None:
            self.close()
        else:
            self.discard()

    def write(self, data):
        self.file.write(data)

    def write_variable(self, type, name, value, constant=True):
        self.write('%sinline %s %s=%s;' % (
            'constexpr ' if constant else '', type, name, value))

    def write_byte_array(self, name, data, constant=True):
        data = bytearray(data)
        values = ''.join('%d,' % b for b in data)
        self.write('%sinline std::array<%s,%d> %s={%s};' % (
            'constexpr ' if constant else '', self.byte_type, len(data),
            name, values))

    def close(self):
        if self.closed:
            return

        if self.namespace:
            self.write('}')
        self.write('\n#endif')
        self.file.close()
        self.closed = True
        log.debug('closed %s', self.path)

    def discard(self):
        ## an unfinished header is never left looking complete
        if self.closed:
            return

        self.file.close()
        self.closed = True
        os.remove(self.path)
        log.debug('discarded %s', self.path)

################################################################################
## EOF
################################################################################
