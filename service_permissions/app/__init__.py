"""
Permission Rules Service application package.

Guidelines:
- Rule bases are immutable; rebuild them when rules change.
- Absence of an applicable rule is a deny, never an error.
- Keep decisions deterministic and observable (metrics + logs).
"""
