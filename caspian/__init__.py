"""Caspian Treasure API: catalog, cart, orders, messages and checkout."""
