"""Domain layer: rule token grammar and enumerations.

This layer depends only on stdlib.
It must never import from rules or config.
"""
