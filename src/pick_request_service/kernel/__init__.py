"""Kernel – errors, message primitives and time helpers shared by all layers."""
