# backend/modules/settings/__init__.py

"""
Settings module - key/value configuration store.

Holds operator-tunable values such as the sales target that drives
notifications.
"""
