"""Services Layer — benefit use cases.

Invariants:
    - One use case class per business action, each with a single execute()
    - Use cases hold only their repository (no per-call state)
    - Domain errors propagate unchanged; StorageError is re-raised with the
      use case's operation name

Design Decisions:
    - Repository injected as the BenefitRepository protocol, so tests pass
      AsyncMock doubles
"""
