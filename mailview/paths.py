# Decompose the path below the mount point into an action name and an
# optional format extension

import mimetypes
import re

from collections import namedtuple

from .exceptions import ( RouteNotRecognized, FormatUnrecognized )

# Trailing path segment: an action name, optionally followed by an extension

RXS_name = r'[A-Za-z0-9_]+'
RXS_ext  = r'\.[A-Za-z0-9_]+'
RX_route = re.compile(r'(?:^|/)(' + RXS_name + r')(' + RXS_ext + r')?\Z')

# Built-in extension table only. Ignoring the host's mime.types files keeps
# lookups identical everywhere.

_mimetypes = mimetypes.MimeTypes(filenames=())

Route = namedtuple('Route', ('name', 'ext', 'format'))

def is_index(path):
    return path in ('', '/')

def parse(path):
    """\
    Returns a Route for the trailing segment of path.

    Raises RouteNotRecognized if the segment isn't a simple name, and
    FormatUnrecognized if it carries an extension nobody knows about.
    """
    m = RX_route.search(path)
    if not m:
        raise RouteNotRecognized(path)

    name, ext = m.group(1), m.group(2)
    format = None
    if ext:
        format = mime_type_for(ext)
        if format is None:
            raise FormatUnrecognized(ext)

    return Route(name, ext, format)

def mime_type_for(ext):
    return _mimetypes.types_map[True].get(ext.lower())

def extension_for(mime_type):
    return _mimetypes.guess_extension(mime_type)
