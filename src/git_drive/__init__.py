"""git-drive: switch git co-authors for pair and mob programming."""

__version__ = "0.7.0"

APP_NAME = "git-drive"
