"""Binary trees, search trees, AVL trees and max heaps with an ASCII printer."""

__version__ = "0.1.0"