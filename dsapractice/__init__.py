"""Data-structure and algorithm practice problems: strings, searching, sequences, scheduling, heaps, linked lists and graphs."""

__version__ = "0.1.0"