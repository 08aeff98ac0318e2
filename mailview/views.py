from django.http                  import ( HttpResponse, HttpResponseNotFound )
from django.shortcuts             import render
from django.urls                  import ( include, re_path )
from django.utils.decorators      import method_decorator
from django.utils.encoding        import escape_uri_path
from django.utils.http            import urlencode
from django.views.decorators.http import require_safe

import logging

from .             import ( conf, paths )
from .exceptions   import ( MailViewError, ActionNotFound )
from .message      import to_part
from .registry     import ActionRegistry
from .resolver     import ( find_part, default_part, alternative_formats )

logger = logging.getLogger(__name__)

FORMAT_LABELS = {
    'text/html':  'HTML',
    'text/plain': 'plain text',
}

class MailView:
    """\
    Serves every registered preview action under one mount point:

        preview = MailView()

        @preview.action
        def welcome():
            return EmailMultiAlternatives(...)

        urlpatterns = [ path('mail/', preview.urls) ]

    GET mail/              index of actions
    GET mail/welcome       headers, with the preferred part in an iframe
    GET mail/welcome.txt   same, preferring text/plain
    GET mail/welcome?part=text%2Fhtml
                           that part's body, verbatim
    """

    def __init__(self, registry=None, interceptor=None, name='mailview',
            index_template_name=None, email_template_name=None, formats=None):
        self.registry            = registry if registry is not None else ActionRegistry()
        self.interceptor         = interceptor
        self.name                = name
        self.index_template_name = index_template_name or conf.index_template()
        self.email_template_name = email_template_name or conf.email_template()
        self.formats             = tuple(formats or conf.default_formats())

    def action(self, func=None, name=None):
        return self.registry.register(func, name=name)

    @property
    def urls(self):
        urlpatterns = [
            re_path(r'^(?P<path>.*)$', self, name='preview'),
        ]
        return include((urlpatterns, 'mailview'), namespace=self.name)

    @method_decorator(require_safe)
    def __call__(self, request, path=''):
        try:
            if paths.is_index(path):
                return self.index(request, path)

            route = paths.parse(path)
            if route.name not in self.registry:
                raise ActionNotFound(route.name)

            mail = self.build_mail(route.name)

            # A specific bare MIME part. Render it verbatim
            if 'part' in request.GET:
                part = find_part(mail, request.GET['part'], formats=self.formats)
                return self.raw(part)

            # Otherwise show the headers and frame the body
            part = default_part(mail, format=route.format, formats=self.formats)

            # The frame can only name a type, so describe the leaf it will load
            if part.mime_type():
                part = find_part(mail, part.mime_type(), formats=self.formats)
            return self.preview(request, route, mail, part)

        except MailViewError as err:
            logger.debug('No preview for %r: %s(%s)', path, type(err).__name__, err)
            return not_found(passable=err.passable)

    def build_mail(self, name):
        mail = self.registry.get(name)()
        if self.interceptor is not None:
            self.interceptor(mail)
        return to_part(mail)

    def index(self, request, path):
        mount = mount_prefix(request, path)
        links = [(name, mount + '/' + name) for name in self.registry.names()]

        return render(request, self.index_template_name, {
            'links': links,
        })

    def preview(self, request, route, mail, part):
        logger.debug('Previewing %s as %s', route.name, part.mime_type())

        base = escape_uri_path(request.path).rsplit('/', 1)[0]
        formats = []
        for content_type in alternative_formats(mail, part, formats=self.formats):
            ext = paths.extension_for(content_type)
            if ext is None:
                continue
            formats.append((
                FORMAT_LABELS.get(content_type, content_type),
                base + '/' + route.name + ext,
            ))

        return render(request, self.email_template_name, {
            'name':     route.name,
            'mail':     mail,
            'headers':  mail.headers().summary(conf.summary_headers()),
            'part':     part,
            'part_url': part_body_url(request, part),
            'formats':  formats,
        })

    def raw(self, part):
        return HttpResponse(part.body(),
                content_type=part.content_type() or 'text/html')

def mount_prefix(request, path):
    """\
    The part of the request path this view is mounted under, without the
    trailing slash. '' when mounted at the root.
    """
    prefix = request.path[:len(request.path) - len(path)] if path else request.path
    return escape_uri_path(prefix.rstrip('/'))

def part_body_url(request, part):
    return escape_uri_path(request.path) + '?' + urlencode({'part': part.mime_type() or ''})

def not_found(passable=False):
    res = HttpResponseNotFound('Not Found', content_type='text/html')
    if passable:
        res['X-Cascade'] = 'pass'
    return res
