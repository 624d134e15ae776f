"""Match measured faces against a dataset by facial proportions"""

__version__ = "0.1.0"
