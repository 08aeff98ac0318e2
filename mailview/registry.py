from django.core.exceptions import ImproperlyConfigured

import logging
import re

logger = logging.getLogger(__name__)

RX_action_name = re.compile(r'^[A-Za-z0-9_]+$')

class ActionRegistry:
    """\
    Named preview actions. Each action is a zero argument callable returning
    the message to preview.

    Registration happens up front. The first read freezes the registry, after
    which it never changes and can be shared between concurrent requests.
    """

    def __init__(self):
        self._actions = {}
        self._frozen  = False

    def register(self, func=None, name=None):
        """\
        Add an action. Works as a plain call or as a decorator, with or
        without a name:

            @registry.register
            def welcome(): ...

            @registry.register(name='welcome_html')
            def welcome_alternative(): ...
        """
        if func is None:
            return lambda f: self.register(f, name=name)

        name = name or func.__name__

        if self._frozen:
            raise ImproperlyConfigured(
                "Can't register '%s': preview actions are already in use" % name)
        if not RX_action_name.match(name):
            raise ImproperlyConfigured(
                "Invalid preview action name '%s'" % name)
        if name in self._actions:
            raise ImproperlyConfigured(
                "Preview action '%s' is already registered" % name)

        logger.debug('Registering preview action %r', name)
        self._actions[name] = func
        return func

    def freeze(self):
        self._frozen = True

    def names(self):
        self.freeze()
        return sorted(self._actions)

    def get(self, name):
        self.freeze()
        return self._actions.get(name)

    def __contains__(self, name):
        self.freeze()
        return name in self._actions

    def __iter__(self):
        return iter(self.names())
