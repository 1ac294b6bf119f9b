"""create-my-internet: interactive bootstrapper for internetdata projects."""

__version__ = "0.1.0"
