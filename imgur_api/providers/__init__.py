"""Concrete implementations of the interfaces in :mod:`imgur_api.interfaces`."""
