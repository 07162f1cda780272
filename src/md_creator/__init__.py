"""md-creator -- create markdown notes from YAML templates."""

__version__ = '1.0.0'
__author__ = 'Morten Johansen (mojoaar)'
