"""
Permission Rules Service package.

Decides whether a permission holder may perform an action on a typed,
named target by running the request, and the permissions it depends on,
through an ordered list of allow/deny rules.

- app.rules: Rule model, key generation and the rule base algorithm.
- app.permissions: Permission kinds and the resolver registry.
- app.holders: Holder composition and the may/may_access accessors.
- app.main: Service wiring for configuration, logging and metrics.
"""
