import pytest

from mailview.exceptions import PartNotFound
from mailview.message    import ( Container, Leaf )
from mailview.resolver   import ( alternative_formats, default_part, find_part, matches )

plain = Leaf('plain', content_type='text/plain; charset=utf-8')
rich  = Leaf('<b>rich</b>', content_type='text/html; charset=UTF-8')
pdf   = Leaf(b'%PDF', content_type='application/pdf')
png   = Leaf(b'PNG', content_type='image/png')

def alternative(*parts):
    return Container('alternative', parts)

def mixed(*parts):
    return Container('mixed', parts)

@pytest.mark.parametrize('content_type, expected', [
    ('text/html',                True),
    ('TEXT/HTML',                True),
    ('text/html; charset=utf-8', True),
    ('text',                     True),
    ('text/plain',               False),
    ('text/htm',                 False),
    ('html',                     False),
])
def test_matches(content_type, expected):
    assert matches(rich, content_type) is expected

def test_matches_ignores_lookalike_subtypes():
    fragment = Leaf('', content_type='text/html-fragment')
    assert not matches(fragment, 'text/html')

def test_untyped_leaf_never_matches_a_named_type():
    assert not matches(Leaf('Hello'), 'text/plain')

def test_leaf_is_its_own_default():
    leaf = Leaf('Hello')
    assert default_part(leaf) is leaf
    assert find_part(leaf, '') is leaf
    assert find_part(leaf, None) is leaf

def test_alternative_defaults_to_last_child():
    assert default_part(alternative(plain, rich)) is rich
    assert default_part(alternative(rich, plain)) is plain

def test_alternative_honours_format_bias():
    assert default_part(alternative(plain, rich), format='text/plain') is plain

def test_alternative_ignores_unmatched_format_bias():
    assert default_part(alternative(plain, rich), format='image/png') is rich

def test_alternative_descends_into_last_child():
    related = Container('related', [png, rich])
    assert default_part(alternative(plain, related)) is rich

def test_mixed_prefers_html_then_text_then_first():
    assert default_part(mixed(pdf, plain, rich)) is rich
    assert default_part(mixed(pdf, plain)) is plain
    assert default_part(mixed(pdf, png)) is pdf

def test_mixed_with_format_bias():
    assert default_part(mixed(pdf, rich, plain), format='text/plain') is plain
    assert default_part(mixed(pdf, rich), format='text/plain') is rich
    assert default_part(mixed(pdf, png), format='text/plain') is pdf

def test_mixed_searches_nested_containers():
    message = mixed(pdf, alternative(plain, rich))
    assert default_part(message) is rich

def test_custom_formats():
    assert default_part(mixed(rich, plain), formats=('text/plain',)) is plain

def test_empty_container_is_not_found():
    with pytest.raises(PartNotFound):
        default_part(mixed())
    with pytest.raises(PartNotFound):
        default_part(alternative())
    with pytest.raises(PartNotFound):
        find_part(mixed(), '')

def test_find_part_is_strict():
    message = mixed(pdf, alternative(plain, rich))
    assert find_part(message, 'text/plain') is plain
    assert find_part(message, 'application/pdf') is pdf
    with pytest.raises(PartNotFound):
        find_part(message, 'image/png')

def test_find_part_first_in_document_order():
    second = Leaf('second', content_type='text/plain')
    assert find_part(mixed(plain, second), 'text/plain') is plain

def test_find_part_never_returns_a_container():
    message = mixed(alternative(plain, rich))
    assert not find_part(message, 'text/html').is_multipart()
    with pytest.raises(PartNotFound):
        find_part(message, 'multipart/alternative')

def test_resolution_is_repeatable():
    message = mixed(pdf, alternative(plain, rich))
    assert default_part(message) is default_part(message)
    assert find_part(message, 'text/plain') is find_part(message, 'text/plain')

def test_alternative_formats():
    message = alternative(plain, rich)
    assert alternative_formats(message, rich) == ['text/plain']
    assert alternative_formats(message, plain) == ['text/html']
    assert alternative_formats(mixed(pdf), pdf) == []

def test_attached_message_is_a_leaf():
    attached = Leaf(b'Subject: Fwd\r\n\r\n<h1>Fwd</h1>', content_type='message/rfc822')
    message = mixed(plain, attached)
    assert default_part(message) is plain
    assert find_part(message, 'message/rfc822') is attached

def test_duplicate_types_resolve_to_first_by_name():
    first  = Leaf('first', content_type='text/html')
    second = Leaf('second', content_type='text/html')
    message = alternative(first, Container('related', [second, png]))
    assert default_part(message) is second
    assert find_part(message, default_part(message).mime_type()) is first
