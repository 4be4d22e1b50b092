"""
yuzupack - interactive builder for YuZuUI character voice packs.

Pick character voices and a texture locale in a terminal wizard, get a
Minecraft resource pack zip with a rewritten sounds.json.
"""
from .constants import VERSION

__version__ = VERSION
