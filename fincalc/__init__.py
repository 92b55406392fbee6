"""fincalc — personal finance calculator backend: accounts, financial profiles, projections.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
