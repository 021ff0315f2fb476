"""Classic data structures and algorithms: graphs, heaps, Huffman coding, trees and pathfinding."""

__version__ = "0.1.0"

__all__ = [
    "graphs",
    "heap",
    "huffman",
    "traversal",
    "treeprint",
    "nary",
    "pathfinding",
    "rbtree",
]