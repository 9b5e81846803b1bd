"""
Actions - operations built on the platform REST client.

Each module wraps one endpoint and converts numeric string fields to ints.
"""
