"""
Vehicle configurator pricing engine.

Catalog of vehicle variants, add-on features, signature bundles and customer
orders with tax and financing math.
"""

__version__ = "1.0.0"
