"""
Core domain models, errors and record contracts of the asset ledger.

This module contains the foundational building blocks that are independent
of the host runtime (key-value store, consensus, credential subsystem).
"""
