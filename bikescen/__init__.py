"""Stochastic trip scenario generation for bike-sharing rebalancing instances."""

__version__ = "0.1.0"