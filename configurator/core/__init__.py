"""
Core domain models, pricing math, and invariants.

This module contains the foundational building blocks that are independent
of the HTTP layer and of any storage.
"""
