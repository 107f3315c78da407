# backend/modules/sales/__init__.py

"""
Sales Module - field sales capture

Agents record sales (amount, quantity, optional product, photo reference
and GPS position); products and users are the reference data sales point
at.
"""
