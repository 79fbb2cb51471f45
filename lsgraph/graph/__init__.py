"""Graph interop helpers.

`convert` exports a `Network` to NetworkX and builds one from a NetworkX
directed graph.
"""
