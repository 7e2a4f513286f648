"""Search algorithms over `graphadt.graph.Graph`.

- ``store``: FIFO and LIFO frontiers.
- ``search``: the generic worklist engine.
- ``paths``: bounded enumeration of all paths between two vertices.
"""
