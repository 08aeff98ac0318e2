from django.http import Http404

class MailViewError(Http404):
    """\
    Base for every reason a preview request ends in a 404.

    passable is True when the path shape was not recognised at all, so an
    enclosing router may try another handler.
    """
    passable = False

class RouteNotRecognized(MailViewError):
    passable = True

class ActionNotFound(MailViewError):
    pass

class FormatUnrecognized(MailViewError):
    pass

class PartNotFound(MailViewError):
    pass
