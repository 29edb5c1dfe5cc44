"""Inventory bounded context.

Sites, the machines installed at them and the external applications
shown as shortcuts in the portal.
"""
