"""In-process summary state and logging helpers.

The accumulator stays dependency-free; logging goes through structlog with
stdlib records rendered by the same handler.
"""
