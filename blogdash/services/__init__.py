from blogdash.services.ownership import OwnershipValidator, ResolvedScope

__all__ = ["OwnershipValidator", "ResolvedScope"]
