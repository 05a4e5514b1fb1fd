"""
KV Store - In-Process Key-Value Store

A small in-memory associative store mapping string keys to string values,
with snapshot enumeration and pluggable outcome reporting.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
