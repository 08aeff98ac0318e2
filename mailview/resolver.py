"""\
Pick the single leaf of a message tree that should be displayed.

Two separate contracts live here. A named content type (find_part) is
authoritative: it matches or it fails. No preference (default_part) walks a
list of preferred formats and always lands on something if the message has
any leaf at all.
"""

from .conf       import DEFAULT_FORMATS
from .exceptions import PartNotFound
from .message    import ( iter_leaves, split_mime_type )

def matches(part, content_type):
    """\
    Does the leaf's declared type/subtype match content_type? Parameters on
    either side are ignored. A bare main type ('text') matches any subtype.
    """
    want_main, want_sub = split_mime_type(content_type)
    have_main, have_sub = split_mime_type(part.content_type())

    if want_main is None or want_main != have_main:
        return False
    return want_sub is None or want_sub == have_sub

def find_part(part, content_type, formats=DEFAULT_FORMATS):
    """\
    The first leaf, in document order, whose type matches content_type.

    A content_type of None (or '') means no preference and is resolved
    like default_part.
    """
    if not content_type:
        return default_part(part, formats=formats)

    found = _first_match(part, content_type)
    if found is None:
        raise PartNotFound(content_type)
    return found

def default_part(part, format=None, formats=DEFAULT_FORMATS):
    """\
    The leaf to show when nobody asked for one in particular.

    Tried in order: the format bias (usually from a path extension), the last
    child of a multipart/alternative, each of formats, then the first leaf.
    """
    if not part.is_multipart():
        return part

    candidates = [format] if format else []

    if part.sub_type() == 'alternative' and part.parts():
        for content_type in candidates:
            found = _first_match(part, content_type)
            if found:
                return found
        return default_part(part.parts()[-1], formats=formats)

    candidates.extend(formats)
    for content_type in candidates:
        found = _first_match(part, content_type)
        if found:
            return found

    for leaf in iter_leaves(part):
        return leaf

    raise PartNotFound()

def alternative_formats(part, shown, formats=DEFAULT_FORMATS):
    """\
    Which of formats, other than the shown leaf's own type, the message could
    also be displayed as
    """
    shown_type = shown.mime_type() if shown else None
    return [content_type for content_type in formats
            if content_type != shown_type and _first_match(part, content_type)]

def _first_match(part, content_type):
    for leaf in iter_leaves(part):
        if matches(leaf, content_type):
            return leaf
    return None
