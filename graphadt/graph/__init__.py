"""Graph primitives and helpers.

This package provides the identity-indexed multigraph `Graph`
(`edge_graph`) and NetworkX conversion helpers (`convert`).
"""
