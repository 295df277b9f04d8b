"""Configuration management for estate-sim."""

from dataclasses import dataclass, field

from estate_sim.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format_type: str = "standard"


@dataclass
class DemoConfig:
    """Demo data seeded into the registry before the menu starts."""

    num_users: int = 0
    num_properties: int = 0
    locale: str = "en_US"

    @property
    def enabled(self) -> bool:
        """Whether any demo records are requested."""
        return self.num_users > 0 or self.num_properties > 0


@dataclass
class PlatformConfig:
    """Main configuration for estate-sim."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    demo: DemoConfig = field(default_factory=DemoConfig)
    seed: int | None = None

    def validate(self) -> None:
        """Check value ranges.

        Raises
        ------
        ConfigurationError
            If any value is out of range.
        """
        if self.logging.format_type not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.logging.format_type!r}, expected one of {LOG_FORMATS}"
            )
        if self.demo.num_users < 0:
            raise ConfigurationError("Demo user count must be non-negative")
        if self.demo.num_properties < 0:
            raise ConfigurationError("Demo property count must be non-negative")

    @classmethod
    def from_env(cls) -> "PlatformConfig":
        """Create config from environment variables."""
        import os

        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "WARNING"),
            format_type=os.getenv("LOG_FORMAT", "standard").lower(),
        )

        demo = DemoConfig(
            num_users=_env_int("DEMO_USERS", 0),
            num_properties=_env_int("DEMO_PROPERTIES", 0),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        )

        seed = _env_int("SEED", None)

        return cls(logging=logging_config, demo=demo, seed=seed)


def _env_int(name: str, default: int | None) -> int | None:
    """Read an integer environment variable."""
    import os

    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
