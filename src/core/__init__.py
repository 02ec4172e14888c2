"""
Core arithmetic building blocks.

Contains the arbitrary-precision integer engine, independent of any I/O.
"""
