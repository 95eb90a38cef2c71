"""Infrastructure Layer: database, logging and collaborator adapters.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All SQLAlchemy failures surface as core DatabaseError
"""
