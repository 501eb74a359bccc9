"""Editor session (action application) and status line."""

from .session import EditorSession
from .status import StatusMessage

__all__ = ["EditorSession", "StatusMessage"]
