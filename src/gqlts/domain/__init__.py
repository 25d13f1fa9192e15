"""Domain layer — type descriptors, type expressions, and naming rules.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
