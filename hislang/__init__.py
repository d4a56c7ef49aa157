"""A compiler for the His language that produces C++ source code."""

__version__ = "0.1.0"