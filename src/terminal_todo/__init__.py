"""
Terminal TODO.

A single-user task list driven by a line-oriented command interpreter.

Packages:
- tasks: data structures and the in-memory task store
- persistence: key-value slot backends + JSON codec for the store state
- cli: command parser/dispatcher, composition root, entrypoint
- connectors: console REPL (presentation)
"""

__version__ = "0.1.0"
