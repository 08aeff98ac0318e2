from django.conf import settings

DEFAULT_INDEX_TEMPLATE  = 'mailview/index.html'
DEFAULT_EMAIL_TEMPLATE  = 'mailview/email.html'
DEFAULT_FORMATS         = ('text/html', 'text/plain')
DEFAULT_SUMMARY_HEADERS = ('From', 'To', 'Cc', 'Bcc', 'Reply-To', 'Subject', 'Date')

def index_template():
    return getattr(settings, 'MAILVIEW_INDEX_TEMPLATE', DEFAULT_INDEX_TEMPLATE)

def email_template():
    return getattr(settings, 'MAILVIEW_EMAIL_TEMPLATE', DEFAULT_EMAIL_TEMPLATE)

def default_formats():
    return tuple(getattr(settings, 'MAILVIEW_DEFAULT_FORMATS', DEFAULT_FORMATS))

def summary_headers():
    return tuple(getattr(settings, 'MAILVIEW_SUMMARY_HEADERS', DEFAULT_SUMMARY_HEADERS))
