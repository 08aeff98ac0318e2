from django.apps import AppConfig


class MailViewConfig(AppConfig):
    name         = 'mailview'
    verbose_name = 'Mail previews'
