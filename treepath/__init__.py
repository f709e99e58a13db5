"""Maximum-sum root-to-leaf paths in trees, found serially or with threads."""

__version__ = "0.1.0"