"""
test-smells-analyzer: a static test smell scanner for Java test sources.

This tool reads test source files as plain text and flags well-known
test smells using line-based heuristics:
- Assertion problems (Assertion Roulette, Duplicate Assert, Unknown Test, ...)
- Test structure problems (Conditional Test Logic, Eager Test, Empty Test, ...)
- Environment dependencies (Mystery Guest, Resource Optimism, Sleepy Test, ...)

Architecture:
- A catalog of independent, pure detector functions
- An ordered registry that runs every detector against each file
- A scan engine that streams findings to a report sink

Usage:
    test-smells [options] path/to/src/test/java
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
