from .composer import compose_message, reference_code
from .fallback import LoggingLauncher, build_fallback_uri
from .notifier import AssignmentNotifier

__all__ = ["AssignmentNotifier", "LoggingLauncher", "build_fallback_uri", "compose_message", "reference_code"]
