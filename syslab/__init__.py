"""Systems programming exercises: debugging allocator, snake game, linked list, schedulers and text helpers."""

__version__ = "0.1.0"