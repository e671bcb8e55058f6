"""Exploratory analysis and survival model for the Titanic passenger list."""

__version__ = "0.1.0"
