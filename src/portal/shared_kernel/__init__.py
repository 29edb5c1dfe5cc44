"""Shared Kernel module.

This module contains foundational components that are explicitly shared across
the bounded contexts of the portal (``iam`` and ``inventory``). Changes to this
module affect every context and should be carefully coordinated.
"""
