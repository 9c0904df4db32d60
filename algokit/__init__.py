"""Classic algorithms and data structures: sorting, searching, sequences, measures,
number theory, puzzles, text patterns, graphs, linked lists, expression trees,
threaded search trees and rated tutorials."""

__version__ = "0.1.0"