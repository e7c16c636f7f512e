from datayoinker.infrastructure.persistence.di import PersistenceProvider

__all__ = ["PersistenceProvider"]
