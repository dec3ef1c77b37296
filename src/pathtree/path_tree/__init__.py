"""Path-addressable tree representation.

This module provides the node and tree classes, the path segment matching rules
used by ``find``, and helpers for building trees from source documents.
"""
