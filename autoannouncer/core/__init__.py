"""Config store, template renderer, and the event bridge that ties them together."""

from autoannouncer.core.bridge import EventBridge
from autoannouncer.core.config_store import ConfigStore
from autoannouncer.core.renderer import Placeholder, render

__all__ = ["ConfigStore", "EventBridge", "Placeholder", "render"]
