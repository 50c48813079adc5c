# Services package init
"""
AI Notes Backend — Services Layer
=================================

Service Inventory:
    - ownership:         owned_by / get_owned_or_404 / owned_document_ids
    - db_errors:         SQLAlchemy failure → DatabaseError / ConflictError
    - DocumentService:   document procedures
    - SummaryService:    summary procedures
    - JobService:        job log procedures

Services take the session and the caller id as arguments and hold no
state, so they can be tested against any AsyncSession.
"""
