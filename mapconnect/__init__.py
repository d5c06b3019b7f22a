"""
mapconnect - connect map footprints to a road network.
"""

__version__ = "0.1.0"
