"""Adapters – optional infrastructure implementations of the service ports.

Each sub-package imports its client library lazily; install the matching
extra (``mongodb``, ``redis``, ``kafka``, ``otel``) to use it.
"""
