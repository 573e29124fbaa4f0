"""A B-tree, a chained hash table, a linked list, optimisation benchmark functions and a genetic algorithm."""

__version__ = "0.1.0"