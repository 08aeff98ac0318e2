import email.header
import email.message
import re

class Header:

    def __init__(self, name, value):
        self._name  = name.strip()
        self._value = str(value).strip()

    def name(self):
        return self._name

    def name_is(self, name):
        return name.lower() == self._name.lower()

    def value(self):
        """\
        Returns the header value, fully decoded
        """
        raw = self.raw_value()

        header = []
        for part in email.header.decode_header(raw):
            if isinstance(part[0], str):
                header.append(part[0])
            else:
                charset = part[1] or 'us-ascii'
                header.append(part[0].decode(charset, errors='replace'))

        header = re.sub(r'\n\s+', '\n', ''.join(header))
        if self.name_is('content-type'):
            header = re.sub(r'\s*[\r\n]+\s*', ' ', header)

        return header

    def raw_value(self):
        """\
        Returns the raw value of the header, prior to decoding
        """
        return self._value

class Headers:

    def __init__(self, headers=None):
        self._headers = list(headers or [])

    def __iter__(self):
        for header in self.get_all():
            yield header

    def get(self, name):
        headers = self.get_all(name)
        if len(headers) == 0:
            return None
        return headers[0]

    def get_all(self, name=None):
        if name == None:
            return self._headers

        headers = []
        for header in self._headers:
            if header.name_is(name):
                headers.append(header)
        return headers

    def summary(self, names):
        """\
        Decoded (name, value) pairs for the given header names, in that
        order, skipping any the message doesn't carry
        """
        summary = []
        for name in names:
            for header in self.get_all(name):
                summary.append((header.name(), header.value()))
        return summary

    @staticmethod
    def from_message(msg):
        headers = list(map(lambda t: Header(*t), msg.items()))
        return Headers(headers)

    @staticmethod
    def from_dict(headers):
        return Headers([Header(name, value) for (name, value) in headers.items()])

def split_mime_type(value):
    """\
    'Text/HTML; charset=UTF-8' -> ('text', 'html'). Either half may be None
    """
    if not value:
        return (None, None)
    value = value.split(';', 1)[0].strip().lower()
    if not value:
        return (None, None)
    main, _, sub = value.partition('/')
    return (main.strip() or None, sub.strip() or None)

class MIMEPart:
    """\
    A node in a message tree: either a Leaf or a Container
    """

    def __init__(self, headers=None):
        if isinstance(headers, dict):
            headers = Headers.from_dict(headers)
        self._headers = headers or Headers()

    def headers(self):
        return self._headers

    def header(self, name):
        return self.headers().get(name)

    def is_multipart(self):
        return False

    def main_type(self):
        return split_mime_type(self.content_type())[0]

    def sub_type(self):
        return split_mime_type(self.content_type())[1]

    def mime_type(self):
        """\
        type/subtype without parameters, or None if no type is declared
        """
        return '/'.join(filter(None, [self.main_type(), self.sub_type()])) or None

class Leaf(MIMEPart):

    def __init__(self, body, content_type=None, headers=None):
        super().__init__(headers)
        self._body         = body
        self._content_type = content_type

    def content_type(self):
        """\
        The declared Content-Type, parameters and all, or None
        """
        return self._content_type

    def body(self):
        return self._body

    def set_body(self, body):
        self._body = body

    def body_size(self):
        body = self.body()
        if isinstance(body, str):
            body = body.encode()
        return len(body or b'')

    def __repr__(self):
        return '<Leaf %s>' % (self.content_type() or 'untyped')

class Container(MIMEPart):

    def __init__(self, sub_type, parts=None, headers=None):
        super().__init__(headers)
        self._sub_type = sub_type.lower()
        self._parts    = list(parts or [])

    def is_multipart(self):
        return True

    def content_type(self):
        return 'multipart/' + self._sub_type

    def sub_type(self):
        return self._sub_type

    def parts(self):
        return self._parts

    def __repr__(self):
        return '<Container %s %r>' % (self.content_type(), self.parts())

def iter_leaves(part):
    """\
    Every leaf below part, in document order
    """
    if part.is_multipart():
        for child in part.parts():
            yield from iter_leaves(child)
    else:
        yield part

def to_part(obj):
    """\
    Turn whatever a preview action returned into a MIMEPart tree.

    Accepts MIMEParts as they are, Django EmailMessage objects and standard
    library email.message.Message objects.
    """
    if isinstance(obj, MIMEPart):
        return obj

    # django.core.mail.EmailMessage and friends
    if not isinstance(obj, email.message.Message) and callable(getattr(obj, 'message', None)):
        obj = obj.message()

    if isinstance(obj, email.message.Message):
        return from_email(obj)

    raise TypeError("Can't preview a %s" % type(obj).__name__)

def from_email(msg):
    headers = Headers.from_message(msg)

    if msg.get_content_maintype() == 'multipart':
        return Container(msg.get_content_subtype(),
                parts=[from_email(child) for child in msg.get_payload()],
                headers=headers)

    # message/rfc822 and friends hold whole messages. Keep them as one
    # leaf holding the attached source
    if msg.is_multipart():
        body = b''.join([child.as_bytes() for child in msg.get_payload()])
    else:
        body = msg.get_payload(decode=True)
    if body is None:
        body = b''

    content_type = msg.get('Content-Type')
    if content_type is not None:
        content_type = str(content_type)

    return Leaf(body, content_type=content_type, headers=headers)
