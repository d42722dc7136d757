from .macro_passthrough import macro_passthrough_plugin
from .notecard import notecard_plugin
from .renderers import renderers_plugin

__all__ = ['macro_passthrough_plugin', 'notecard_plugin', 'renderers_plugin']
