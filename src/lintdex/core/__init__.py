"""lintdex core library: rule model, configuration and the rule catalog."""

from . import exceptions  # noqa: F401
