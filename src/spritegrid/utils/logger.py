"""Global logging and error reporting utilities"""
import logging
import traceback

_logger = logging.getLogger('spritegrid')

# Front-end callback that surfaces messages to the user: callback(title, message)
_notice_handler = None


def set_notice_handler(handler):
    """Set the callback used to show messages to the user

    Args:
        handler: Callable taking (title, message), or None to disable
    """
    global _notice_handler
    _notice_handler = handler


def notify(message: str, title: str = "Notice"):
    """Report a non-fatal condition (refused or truncated operation)

    Args:
        message: User-facing message
        title: Short heading for the message
    """
    _logger.warning(f"{title}: {message}")
    if _notice_handler:
        _notice_handler(title, message)


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Log an exception, show it to the user, then re-raise it

    Args:
        e: The exception to handle
        user_message: User-friendly message to show (defaults to str(e))
        title: Title for the message

    Raises:
        The exception passed in, always
    """
    tb = ''.join(traceback.format_exception(type(e), e, e.__traceback__))
    _logger.error(f"{title}: {tb}")

    message = user_message if user_message else str(e)
    if _notice_handler:
        _notice_handler(title, message)

    raise e
