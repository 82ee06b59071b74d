"""
CLI Commands.

Organized by remote resource type.
"""

from myracli.cli.commands.cache_setting import cache_setting
from myracli.cli.commands.redirect import redirect
from myracli.cli.commands.system import app as system_app

__all__ = [
    "cache_setting",
    "redirect",
    "system_app",
]
