from .tools import structural_key

__all__ = [
    'structural_key',
    ]
