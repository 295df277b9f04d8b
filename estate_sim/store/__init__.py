"""In-memory registry for users and properties."""

from estate_sim.store.platform import PurchaseOutcome, RealEstatePlatform

__all__ = ["PurchaseOutcome", "RealEstatePlatform"]
