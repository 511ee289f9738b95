"""Small terminal games, calculators and exercises: 2048, banking, rock-paper-scissors and more."""

__version__ = "0.1.0"