"""
Service layer abstraction.

Services encapsulate the rules applied to the product collection so
that API handlers only translate between HTTP and service results.
"""
