"""Service layer — ServiceResult-returning operations over TieredDomain.

The CLI and any future adapter consume these services; none of them
raise DomainError to the caller.
"""
