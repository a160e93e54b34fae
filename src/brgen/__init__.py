"""
brgen - BR class generator.

Assigns stable integer indices to bindable property names and emits the
Java ``BR`` class that data-binding code uses to refer to them.
"""

__version__ = "1.0.0"
