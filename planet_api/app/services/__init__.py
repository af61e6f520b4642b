"""
Service layer abstraction.

Each service encapsulates the logic behind one group of endpoints and
receives its collaborators (the store, file paths) at construction
time.
"""
