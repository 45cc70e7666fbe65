"""
enumgen: generate Python enum modules from asset and resource files.
"""

__version__ = "0.1.0"
