"""
Form Definition Compiler (formdef) Package

Turns declarative JSON form definitions into ordered, renderable form objects.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - HTML rendering or templates
    - Persistence of submitted values
    - Sessions or authentication

This package defines FORM STRUCTURE only.

Rendering and validation of the compiled form happen in external layers.
"""

__version__ = "0.1.0"
