"""Constants of the inventory domain."""

UNASSIGNED_USER_NAME = "Unassigned"

DEFAULT_LOCATION_NAMES: tuple[str, ...] = (
    "Pitten",
    "Trostberg",
    "Dunaújváros",
    "Spremberg",
    "Corlu",
    "Denizli",
    "Gelsenkirchen",
)

MACHINES_PER_DEFAULT_LOCATION = 3


def default_machine_names() -> list[str]:
    """Names of the machines seeded at each default location (PM1, PM2, ...)."""
    return [f"PM{i}" for i in range(1, MACHINES_PER_DEFAULT_LOCATION + 1)]
