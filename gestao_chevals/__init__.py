"""
Gestão Chevals
"""
__version__ = "1.0.0"
