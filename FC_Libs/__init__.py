"""
FC_Libs - Film Camera Library Modules

This package contains core functionality for the Film Camera project,
organized into specialized sub-packages:

- FilterLib: Film filter primitives, film type pipelines and the JPEG codec
- PairStoreLib: Original/filtered image pairs and their persistence
- CaptureLib: Capture sources, the capture pipeline and the camera session
"""

__version__ = "0.1.0"
