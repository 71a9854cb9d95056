"""Remote control for the Shell.FM radio player."""

__version__ = "0.1.0"

from shellfm.client import ShellFM  # noqa: E402

__all__ = ["ShellFM", "__version__"]
