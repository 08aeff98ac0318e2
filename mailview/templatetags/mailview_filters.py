from django import template
from django.utils.safestring import mark_safe

import email.utils
import html

register = template.Library()

address_headers = [
    'from',
    'to',
    'cc',
    'bcc',
    'reply-to',
    'sender',
]

@register.filter(name='bytes_to_human')
def bytes_to_human(bytes):
    """\
    Converts a size in bytes to one in a more human readable format.
    """
    bytes = int(bytes or 0)
    if bytes < 1024:               return "{:,}".format(bytes) + 'B'
    if bytes < 1024 * 1024:        return "{:,}".format(int(bytes/1024)) + 'KB'
    if bytes < 1024 * 1024 * 1024: return "{:,.1f}".format(bytes/1024/1024) + 'MB'
    return "{:,.1f}".format(bytes/1024/1024/1024) + 'GB'

def email_html(name, address):
    return '<a href="mailto:' + html.escape(address) + '" class="email">' \
            + html.escape(name + " <" + address + ">" if name else address) + "</a>"

@register.filter(name='address_html')
def address_html(value):
    """\
    Turns an address list header into mailto links, keeping display names
    """
    links = []
    for (name, address) in email.utils.getaddresses([value]):
        if address:
            links.append(email_html(name, address))
        elif name:
            links.append(html.escape(name))
    if not links:
        return value
    return mark_safe(', '.join(links))

@register.filter(name='header_html')
def header_html(value, name):
    if name.lower() in address_headers:
        return address_html(value)
    return value
