"""
Infrastructure layer: adapters concretos (PostgreSQL, in-memory, argon2, pool).
"""
