"""HTTP API routes"""
from .routes import router, get_dataset

__all__ = [
    'router',
    'get_dataset'
]
