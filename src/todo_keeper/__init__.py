"""todo-keeper: a personal task tracker backed by a flat text file."""

__version__ = "0.1.0"
