"""testplane: discover, order and run test files across project roots."""

__version__ = "0.1.0"
