"""
SC_Libs - Square Cutter Library Modules

This package contains core functionality for the Square Cutter crop tool,
organized into specialized sub-packages:

- CropEditingLib: Crop region model, interaction state machine, preview
  cache, exporter and the editor window
"""

__version__ = "0.1.0"
