"""Blue Lock Terminal - personal ego, trade and drill tracker."""

__version__ = "0.1.0"
