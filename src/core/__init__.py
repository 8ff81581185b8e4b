"""
Core value types, arithmetic, domain models, and contracts.

This module contains the foundational building blocks that are independent
of any caller (stdin drivers, services, etc.).
"""
