"""A command-line task list backed by a JSON file, with in-memory storage and table or JSON output."""

__version__ = "0.1.0"