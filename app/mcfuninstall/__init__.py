"""mcf-uninstall - uninstall function generator for Minecraft datapacks.

Scans ``.mcfunction`` files for scoreboard objectives, teams, bossbars,
storage keys and entity tags, and writes the commands that remove them.
"""

__version__ = "1.0.0"
