# ==============================================================================
# CATALOG API PACKAGE
# ==============================================================================

"""
Product Catalog API
===================

FastAPI service for products, brands and categories backed by SQLAlchemy.
"""

__version__ = "1.0.0"
