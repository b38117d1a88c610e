"""Data structures, threading demos, a small HTTP server and client, and an orbit simulation."""

__version__ = "0.1.0"