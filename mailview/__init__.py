from .registry import ActionRegistry
from .views    import MailView

__all__ = ['ActionRegistry', 'MailView']
