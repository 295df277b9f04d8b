"""Demo data generators."""

from estate_sim.generators.demo import DemoDataGenerator, PropertyGenerator, UserGenerator

__all__ = ["DemoDataGenerator", "PropertyGenerator", "UserGenerator"]
